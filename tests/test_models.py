# Tests for core data models
import pytest

from n8nmcp.models import ClientInfo, FetchResponse, IntegrationResult, McpEntry


def test_mcp_entry_defaults():
    """Test McpEntry with default values."""
    entry = McpEntry(command="npx")
    assert entry.args == []
    assert entry.env == {}


def test_mcp_entry_immutability():
    """Test that McpEntry is frozen (immutable)."""
    entry = McpEntry(command="npx", args=["-y", "pkg"])
    with pytest.raises(AttributeError):
        entry.command = "node"


def test_mcp_entry_to_dict():
    """Test the JSON-ready form has exactly command, args and env."""
    entry = McpEntry(command="npx", args=["-y", "pkg"], env={"KEY": "value"})
    assert entry.to_dict() == {
        "command": "npx",
        "args": ["-y", "pkg"],
        "env": {"KEY": "value"},
    }


def test_client_info_is_value_type():
    """Two ClientInfo with the same fields are equal."""
    assert ClientInfo(name="Cursor", mode="json") == ClientInfo(name="Cursor", mode="json")
    assert ClientInfo(name="Cursor", mode="json").config_path is None


def test_integration_result_success():
    """Test success results carry an action and no reason."""
    result = IntegrationResult.success("updated")
    assert result.ok is True
    assert result.action == "updated"
    assert result.reason is None


def test_integration_result_failure():
    """Test failure results carry a reason and no action."""
    result = IntegrationResult.failure("nope")
    assert result.ok is False
    assert result.action is None
    assert result.reason == "nope"


def test_fetch_response_ok_range():
    """Only 2xx statuses are ok."""
    assert FetchResponse(status=200).ok
    assert FetchResponse(status=204).ok
    assert not FetchResponse(status=301).ok
    assert not FetchResponse(status=401).ok


def test_fetch_response_json():
    """Test JSON body parsing tolerates invalid bodies."""
    assert FetchResponse(status=200, body=b'{"data": []}').json() == {"data": []}
    assert FetchResponse(status=200, body=b"<html>").json() is None
