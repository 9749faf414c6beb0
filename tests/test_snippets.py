# Tests for manual configuration snippets
import json
from pathlib import Path
from unittest.mock import patch

from n8nmcp.integrate import PACKAGE_NAME, integrate_client
from n8nmcp.models import ClientInfo, McpEntry
from n8nmcp.snippets import manual_snippet

SAMPLE_ENV = {"N8N_API_URL": "http://localhost:5678", "N8N_API_KEY": "test-key-123"}
NPX_ENTRY = McpEntry(command="npx", args=["-y", PACKAGE_NAME], env=SAMPLE_ENV)
WIN_ENTRY = McpEntry(command="tcs-n8n-mcp", args=[], env=SAMPLE_ENV)
CLI_CLIENT = ClientInfo(name="Claude Code", mode="cli")


def test_cli_snippet_npx():
    """CLI clients get the claude mcp add command."""
    snippet = manual_snippet(CLI_CLIENT, NPX_ENTRY)
    assert "claude mcp add tcs-n8n-mcp" in snippet
    assert "npx -y @thecodesaiyan/tcs-n8n-mcp" in snippet
    assert "-e N8N_API_URL=http://localhost:5678" in snippet


def test_cli_snippet_binary():
    snippet = manual_snippet(CLI_CLIENT, WIN_ENTRY)
    assert "-- tcs-n8n-mcp" in snippet
    assert "npx" not in snippet


@patch("n8nmcp.integrate.subprocess.run")
def test_cli_snippet_matches_executed_command(mock_run):
    """The snippet is exactly what automatic integration runs."""
    integrate_client(CLI_CLIENT, NPX_ENTRY)
    assert mock_run.call_args[0][0] == manual_snippet(CLI_CLIENT, NPX_ENTRY)


def test_json_snippet():
    """json clients get a labeled JSON fragment."""
    client = ClientInfo(
        name="Claude Desktop", mode="json", config_path=Path("/some/path"), json_key="mcpServers"
    )
    snippet = manual_snippet(client, NPX_ENTRY)

    assert snippet.startswith('Add to your config JSON under "mcpServers":')
    assert '"tcs-n8n-mcp": {' in snippet
    assert '"npx"' in snippet


def test_json_snippet_fragment_is_entry_only():
    """The fragment is the entry itself, not a whole document."""
    client = ClientInfo(name="VS Code / Cline", mode="manual", json_key="mcpServers")
    snippet = manual_snippet(client, NPX_ENTRY)

    fragment = snippet.split('"tcs-n8n-mcp": ', 1)[1]
    assert json.loads(fragment) == NPX_ENTRY.to_dict()


def test_manual_snippet_default_key():
    """Clients without a key fall back to mcpServers."""
    client = ClientInfo(name="Other", mode="manual")
    assert '"mcpServers"' in manual_snippet(client, NPX_ENTRY)
