# Client catalog
from n8nmcp.models import ClientSpec, PlatformPath
from n8nmcp.platforms.paths import resolve_config_path, template_for_platform

# ABOUTME: Known MCP clients in the order they are offered to the user
CLIENT_SPECS: tuple[ClientSpec, ...] = (
    ClientSpec(
        name="Claude Desktop",
        mode="json",
        json_key="mcpServers",
        config_paths=(
            PlatformPath("win32", "%APPDATA%/Claude/claude_desktop_config.json"),
            PlatformPath("darwin", "Library/Application Support/Claude/claude_desktop_config.json"),
            PlatformPath("linux", ".config/Claude/claude_desktop_config.json"),
        ),
    ),
    ClientSpec(
        name="Cursor",
        mode="json",
        json_key="mcpServers",
        config_paths=(
            PlatformPath("win32", ".cursor/mcp.json"),
            PlatformPath("darwin", ".cursor/mcp.json"),
            PlatformPath("linux", ".cursor/mcp.json"),
        ),
    ),
    ClientSpec(
        name="Windsurf",
        mode="json",
        json_key="mcpServers",
        config_paths=(
            PlatformPath("win32", ".codeium/windsurf/mcp_config.json"),
            PlatformPath("darwin", ".codeium/windsurf/mcp_config.json"),
            PlatformPath("linux", ".codeium/windsurf/mcp_config.json"),
        ),
    ),
    ClientSpec(
        name="Claude Code",
        mode="cli",
    ),
    ClientSpec(
        name="VS Code / Cline",
        mode="manual",
        json_key="mcpServers",
    ),
)

__all__ = [
    "CLIENT_SPECS",
    "get_client_spec",
    "resolve_config_path",
    "template_for_platform",
]


def get_client_spec(name: str) -> ClientSpec | None:
    """Look up a catalog entry by display name (case-insensitive)."""
    for spec in CLIENT_SPECS:
        if spec.name.lower() == name.lower():
            return spec
    return None
