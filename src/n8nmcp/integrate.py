# Client integration: write or register the MCP entry with a host client
import logging
import subprocess
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from n8nmcp.models import ClientInfo, IntegrationResult, McpEntry
from n8nmcp.platforms.base import read_json_document, write_json_document

logger = logging.getLogger(__name__)

# ABOUTME: Key under which our entry lives in every host config
SERVER_KEY = "tcs-n8n-mcp"

# ABOUTME: npm package and standalone binary that run the MCP server
PACKAGE_NAME = "@thecodesaiyan/tcs-n8n-mcp"
BINARY_NAME = "tcs-n8n-mcp"
PACKAGE_RUNNER = "npx"

CLI_ADD_PREFIX = f"claude mcp add {SERVER_KEY}"
CLI_TIMEOUT = 10  # seconds


def build_mcp_config(platform: str, env: Mapping[str, str]) -> McpEntry:
    """Build the MCP entry for the stdio transport.

    ABOUTME: Windows runs the installed binary directly, npx elsewhere
    ABOUTME: env is passed through as given

    Examples:
        >>> build_mcp_config("linux", {"N8N_API_KEY": "k"}).args
        ['-y', '@thecodesaiyan/tcs-n8n-mcp']
        >>> build_mcp_config("win32", {}).command
        'tcs-n8n-mcp'
    """
    if platform == "win32":
        return McpEntry(command=BINARY_NAME, args=[], env=env)
    return McpEntry(command=PACKAGE_RUNNER, args=["-y", PACKAGE_NAME], env=env)


def build_cli_command(entry: McpEntry) -> str:
    """Build the `claude mcp add` command line for an entry.

    ABOUTME: One -e KEY=VALUE flag per env var, in mapping order
    ABOUTME: Values are interpolated as-is, not shell-quoted
    """
    env_flags = " ".join(f"-e {key}={value}" for key, value in entry.env.items())

    if entry.command == BINARY_NAME:
        target = BINARY_NAME
    else:
        target = f"{PACKAGE_RUNNER} -y {PACKAGE_NAME}"

    return f"{CLI_ADD_PREFIX} {env_flags} -- {target}"


def integrate_client(client: ClientInfo, entry: McpEntry) -> IntegrationResult:
    """Write or register the MCP entry with a detected client.

    ABOUTME: Dispatches on client mode: cli shells out, json merges the file
    ABOUTME: Manual clients and incomplete json clients fail immediately
    ABOUTME: Expected failures come back as results, OSError on write propagates

    Args:
        client: Detected client to integrate with
        entry: MCP entry to register

    Returns:
        IntegrationResult with the action taken or the failure reason
    """
    if client.mode == "cli":
        result = _integrate_cli(entry)
    elif client.mode != "json" or client.config_path is None or not client.json_key:
        result = IntegrationResult.failure("Client does not support auto-integration")
    else:
        result = _integrate_json(client.config_path, client.json_key, entry)

    if result.ok:
        logger.info(f"{client.name}: entry {result.action}")
    else:
        logger.warning(f"{client.name}: {result.reason}")
    return result


def _integrate_cli(entry: McpEntry) -> IntegrationResult:
    """Register the entry through the Claude Code CLI.

    ABOUTME: Exit status is the only signal, so success is always "added"
    """
    command = build_cli_command(entry)
    try:
        subprocess.run(
            command,
            shell=True,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            timeout=CLI_TIMEOUT,
            check=True,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug(f"claude mcp add failed: {e}")
        return IntegrationResult.failure("claude mcp add failed; configure manually")

    return IntegrationResult.success("added")


def _integrate_json(config_path: Path, json_key: str, entry: McpEntry) -> IntegrationResult:
    """Merge the entry into a client's JSON config file.

    ABOUTME: Keeps every unrelated top-level key and sibling server entry
    ABOUTME: A missing or non-object json_key value is replaced by a fresh mapping
    ABOUTME: Malformed files are reported and never rewritten
    """
    existing: dict[str, Any] = {}
    had_entry = False

    if config_path.exists():
        try:
            document = read_json_document(config_path)
        except ValueError:
            return IntegrationResult.failure(f"Malformed JSON in {config_path}; fix manually")

        if not isinstance(document, dict):
            return IntegrationResult.failure(
                f"Malformed JSON in {config_path} (expected an object); fix manually"
            )
        existing = document

        servers = existing.get(json_key)
        had_entry = isinstance(servers, dict) and SERVER_KEY in servers

    existing_servers = existing.get(json_key)
    if not isinstance(existing_servers, dict):
        existing_servers = {}

    merged: dict[str, Any] = {
        **existing,
        json_key: {
            **existing_servers,
            SERVER_KEY: entry.to_dict(),
        },
    }

    write_json_document(config_path, merged)

    return IntegrationResult.success("updated" if had_entry else "added")
