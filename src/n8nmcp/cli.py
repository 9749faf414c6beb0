# CLI interface for tcs-n8n-mcp setup
import argparse
import logging
import sys

from n8nmcp import __version__
from n8nmcp.client import N8nClient
from n8nmcp.config import check_connection, load_settings
from n8nmcp.detect import detect_clients
from n8nmcp.integrate import build_mcp_config
from n8nmcp.models import ClientInfo
from n8nmcp.platforms import get_client_spec
from n8nmcp.snippets import manual_snippet
from n8nmcp.wizard import (
    EXIT_FATAL,
    EXIT_INPUT_ERROR,
    EXIT_PARTIAL,
    EXIT_SUCCESS,
    cmd_setup,
)


def cmd_detect(args: argparse.Namespace) -> int:
    """Execute detect command.

    ABOUTME: Lists clients found on this machine with their integration mode
    """
    print(f"tcs-n8n-mcp detect v{__version__}")
    print()

    clients = detect_clients(args.platform)
    for client in clients:
        print(f"  {client.name}")
        print(f"    mode: {client.mode}")
        if client.config_path:
            print(f"    config: {client.config_path}")
        print()

    print(f"Total: {len(clients)} client(s)")
    return EXIT_SUCCESS


def cmd_snippet(args: argparse.Namespace) -> int:
    """Execute snippet command.

    ABOUTME: Prints the manual configuration for one client
    ABOUTME: Uses N8N_* values from the environment
    """
    spec = get_client_spec(args.client)
    if spec is None:
        print(f"Error: Unknown client '{args.client}'")
        return EXIT_INPUT_ERROR

    try:
        settings = load_settings()
    except ValueError as e:
        print(f"Error: {e}")
        return EXIT_INPUT_ERROR

    client = ClientInfo(name=spec.name, mode=spec.mode, json_key=spec.json_key)
    entry = build_mcp_config(args.platform, settings.to_env())
    print(manual_snippet(client, entry))
    return EXIT_SUCCESS


def cmd_check(args: argparse.Namespace) -> int:
    """Execute check command.

    ABOUTME: Verifies the N8N_* environment can reach the API
    """
    print(f"tcs-n8n-mcp check v{__version__}")
    print()

    try:
        settings = load_settings()
    except ValueError as e:
        print(f"Error: {e}")
        return EXIT_INPUT_ERROR

    print(f"Checking {settings.api_base}...")
    ok, message = check_connection(N8nClient(settings), settings.api_base)
    if ok:
        print(f"  ✓ {message}")
        return EXIT_SUCCESS
    print(f"  ✗ {message}")
    return EXIT_PARTIAL


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    ABOUTME: Parses args and dispatches to appropriate command
    ABOUTME: Returns exit code for sys.exit()
    """
    parser = argparse.ArgumentParser(
        prog="tcs-n8n-mcp-setup",
        description="Register the n8n MCP server with installed AI clients"
    )

    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"tcs-n8n-mcp v{__version__}"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging"
    )
    parser.add_argument(
        "--platform",
        default=sys.platform,
        help="Target platform identifier (default: current platform)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    setup_parser = subparsers.add_parser(
        "setup",
        help="Interactively configure detected clients"
    )
    setup_parser.add_argument(
        "--no-verify",
        action="store_true",
        help="Skip the n8n connection check"
    )

    subparsers.add_parser(
        "detect",
        help="List MCP clients found on this machine"
    )

    snippet_parser = subparsers.add_parser(
        "snippet",
        help="Print manual configuration for a client"
    )
    snippet_parser.add_argument(
        "client",
        help="Client name, e.g. 'Cursor' or 'Claude Code'"
    )

    subparsers.add_parser(
        "check",
        help="Check the n8n connection from N8N_* variables"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "setup":
            return cmd_setup(platform=args.platform, verify=not args.no_verify)
        elif args.command == "detect":
            return cmd_detect(args)
        elif args.command == "snippet":
            return cmd_snippet(args)
        elif args.command == "check":
            return cmd_check(args)
        else:
            parser.print_help()
            return EXIT_SUCCESS
    except KeyboardInterrupt:
        print()
        print("Cancelled.")
        return EXIT_INPUT_ERROR
    except Exception as e:
        print(f"Fatal error: {e}")
        return EXIT_FATAL


if __name__ == "__main__":
    sys.exit(main())
