# tcs-n8n-mcp - n8n MCP server setup and client integration
# ABOUTME: Version information
__version__ = "1.0.1"

# ABOUTME: Export core data models
from n8nmcp.models import ClientInfo, ClientSpec, IntegrationResult, McpEntry

# ABOUTME: Export setup engine functions
from n8nmcp.detect import detect_clients
from n8nmcp.integrate import SERVER_KEY, build_mcp_config, integrate_client
from n8nmcp.snippets import manual_snippet

__all__ = [
    "__version__",
    "ClientInfo",
    "ClientSpec",
    "IntegrationResult",
    "McpEntry",
    "SERVER_KEY",
    "build_mcp_config",
    "detect_clients",
    "integrate_client",
    "manual_snippet",
]
