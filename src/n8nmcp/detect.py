# Client detection for the setup wizard
import logging
import subprocess
import sys
from collections.abc import Mapping
from pathlib import Path

from n8nmcp.models import ClientInfo
from n8nmcp.platforms import CLIENT_SPECS, resolve_config_path, template_for_platform

logger = logging.getLogger(__name__)

# ABOUTME: Version probe for the Claude Code CLI
CLAUDE_PROBE_COMMAND = ["claude", "--version"]
PROBE_TIMEOUT = 5  # seconds


def claude_code_available(timeout: int = PROBE_TIMEOUT) -> bool:
    """Check whether the Claude Code CLI can be invoked.

    ABOUTME: Runs `claude --version` with output discarded
    ABOUTME: Missing binary, non-zero exit and timeout all count as absent
    """
    try:
        subprocess.run(
            CLAUDE_PROBE_COMMAND,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            timeout=timeout,
            check=True,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug(f"Claude Code CLI not available: {e}")
        return False
    return True


def detect_clients(
    platform: str = sys.platform,
    home: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> list[ClientInfo]:
    """Scan for installed MCP clients.

    ABOUTME: json clients are detected by their config file or its parent dir
    ABOUTME: cli clients are detected by probing their command
    ABOUTME: manual clients are always listed
    ABOUTME: Results follow catalog order and are never cached

    Args:
        platform: Target platform identifier (defaults to sys.platform)
        home: Home directory override, mainly for tests
        environ: Environment override, mainly for tests

    Returns:
        Detected clients in catalog order
    """
    detected: list[ClientInfo] = []

    for spec in CLIENT_SPECS:
        if spec.mode == "json":
            template = template_for_platform(spec, platform)
            if template is None:
                logger.debug(f"{spec.name}: not supported on {platform}")
                continue

            config_path = Path(resolve_config_path(template, platform, home=home, environ=environ))
            # Config file may not exist yet, the app dir is enough
            if config_path.exists() or config_path.parent.exists():
                logger.debug(f"{spec.name}: found at {config_path}")
                detected.append(ClientInfo(
                    name=spec.name,
                    mode="json",
                    config_path=config_path,
                    json_key=spec.json_key,
                ))
            else:
                logger.debug(f"{spec.name}: {config_path.parent} does not exist")

        elif spec.mode == "cli":
            if claude_code_available():
                detected.append(ClientInfo(name=spec.name, mode="cli"))

        else:
            detected.append(ClientInfo(name=spec.name, mode="manual", json_key=spec.json_key))

    return detected
