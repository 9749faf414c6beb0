# Copy-paste snippets for manual client configuration
import json

from n8nmcp.integrate import SERVER_KEY, build_cli_command
from n8nmcp.models import ClientInfo, McpEntry

DEFAULT_JSON_KEY = "mcpServers"


def manual_snippet(client: ClientInfo, entry: McpEntry) -> str:
    """Build a copy-paste snippet for configuring a client by hand.

    ABOUTME: cli clients get the exact command integrate_client would run
    ABOUTME: Everything else gets the entry as a JSON fragment under SERVER_KEY

    Args:
        client: Client the snippet is for
        entry: MCP entry to show

    Returns:
        Snippet text ready to print
    """
    if client.mode == "cli":
        return build_cli_command(entry)

    key_label = client.json_key or DEFAULT_JSON_KEY
    fragment = json.dumps(entry.to_dict(), indent=4, ensure_ascii=False)
    return f'Add to your config JSON under "{key_label}":\n\n  "{SERVER_KEY}": {fragment}'
