# Config path resolution for client catalog templates
import os
from collections.abc import Mapping
from pathlib import Path

from n8nmcp.models import ClientSpec

APPDATA_PLACEHOLDER = "%APPDATA%"


def template_for_platform(spec: ClientSpec, platform: str) -> str | None:
    """Return the path template a client uses on the given platform.

    ABOUTME: None means the client is not supported on that platform
    """
    for entry in spec.config_paths:
        if entry.platform == platform:
            return entry.path
    return None


def resolve_config_path(
    template: str,
    platform: str,
    home: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Turn a catalog path template into an absolute path for this user.

    ABOUTME: Windows templates may start with %APPDATA%, falling back to
    ABOUTME: <home>/AppData/Roaming when the variable is unset
    ABOUTME: Everything else is joined onto the home directory
    ABOUTME: Never touches the filesystem

    Args:
        template: Path template from the client catalog ("/"-separated)
        platform: Target platform identifier (sys.platform style)
        home: Home directory (defaults to Path.home())
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Absolute path string

    Examples:
        >>> resolve_config_path(".cursor/mcp.json", "linux", home=Path("/home/ada"))
        '/home/ada/.cursor/mcp.json'
    """
    home_dir = str(home if home is not None else Path.home())
    env = environ if environ is not None else os.environ

    if platform == "win32" and template.startswith(APPDATA_PLACEHOLDER):
        app_data = env.get("APPDATA") or os.path.join(home_dir, "AppData", "Roaming")
        return template.replace(APPDATA_PLACEHOLDER, app_data, 1).replace("/", "\\")

    return os.path.join(home_dir, *template.split("/"))
