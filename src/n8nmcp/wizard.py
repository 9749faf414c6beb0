# Interactive setup wizard
import logging
import os
import sys
from collections.abc import Callable, Mapping

from n8nmcp.client import N8nClient
from n8nmcp.config import (
    DEFAULT_API_URL,
    AuthType,
    Settings,
    check_connection,
    parse_auth_type,
)
from n8nmcp.detect import detect_clients
from n8nmcp.integrate import build_mcp_config, integrate_client
from n8nmcp.models import ClientInfo, McpEntry
from n8nmcp.snippets import manual_snippet

logger = logging.getLogger(__name__)

# ABOUTME: Terminal codes for interactive UI
CLEAR_SCREEN = "\033[2J\033[H"
BOLD = "\033[1m"
RESET = "\033[0m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
CYAN = "\033[96m"

# ABOUTME: Exit codes shared with the CLI
EXIT_SUCCESS = 0
EXIT_PARTIAL = 1
EXIT_INPUT_ERROR = 2
EXIT_FATAL = 3

InputFn = Callable[[str], str]
SelectFn = Callable[[list[str], set[str]], list[str]]


def _numbered_select(items: list[str], selected: set[str]) -> list[str]:
    """Numbered-list fallback for terminals without raw input."""
    print(f"{BOLD}Select clients to configure:{RESET}")
    print()
    for idx, item in enumerate(items):
        status = " [preselected]" if item in selected else ""
        print(f"  {idx + 1}. {item}{status}")

    print()
    print("Enter comma-separated numbers (e.g., 1,3) or press Enter for defaults:")
    user_input = sys.stdin.readline().strip()

    if user_input:
        chosen: set[str] = set()
        try:
            for num_str in user_input.split(","):
                idx = int(num_str.strip()) - 1
                if 0 <= idx < len(items):
                    chosen.add(items[idx])
            selected = chosen
        except ValueError:
            print("Invalid input. Using defaults.")

    return [item for item in items if item in selected]


# ABOUTME: Raw key sequences understood by the selector
KEY_ACTIONS = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "k": "up",
    "j": "down",
    " ": "toggle",
    "a": "toggle_all",
    "\r": "confirm",
    "\n": "confirm",
    "\x03": "cancel",
}


def _read_key() -> str:
    """Read one keypress in raw mode and return its action name, or ""."""
    import termios
    import tty

    fd = sys.stdin.fileno()
    old_settings = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        key = sys.stdin.read(1)
        # Arrow keys arrive as ESC [ A/B
        if key == "\x1b":
            key += sys.stdin.read(2)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
    return KEY_ACTIONS.get(key, "")


def _render_selection(items: list[str], selected: set[str], cursor: int) -> None:
    print(CLEAR_SCREEN, end="")
    print(f"{BOLD}Select clients to configure:{RESET}")
    print()
    for idx, item in enumerate(items):
        mark = f"{GREEN}[x]{RESET}" if item in selected else "[ ]"
        pointer = f"{CYAN}>{RESET} " if idx == cursor else "  "
        print(f"{pointer}{mark} {item}")
    print()
    print("Up/down or j/k to move, space to toggle, a for all, enter to confirm.")


def interactive_select(
    items: list[str],
    preselected: set[str],
    read_key: Callable[[], str] = _read_key,
) -> list[str]:
    """Terminal multi-select for picking clients.

    ABOUTME: Needs termios and a tty, otherwise falls back to numbered input
    ABOUTME: Ctrl+C raises KeyboardInterrupt

    Args:
        items: Labels to choose from
        preselected: Labels that start selected
        read_key: Returns the next action name (see KEY_ACTIONS)

    Returns:
        Selected labels in the order they were listed
    """
    if not items:
        return []

    selected: set[str] = set(preselected) & set(items)

    if read_key is _read_key:
        try:
            import termios  # noqa: F401
        except ImportError:
            return _numbered_select(items, selected)
        if not sys.stdin.isatty():
            return _numbered_select(items, selected)

    cursor = 0
    while True:
        _render_selection(items, selected, cursor)
        action = read_key()

        if action == "up":
            cursor = (cursor - 1) % len(items)
        elif action == "down":
            cursor = (cursor + 1) % len(items)
        elif action == "toggle":
            selected ^= {items[cursor]}
        elif action == "toggle_all":
            selected = set() if len(selected) == len(items) else set(items)
        elif action == "confirm":
            break
        elif action == "cancel":
            print(CLEAR_SCREEN, end="")
            raise KeyboardInterrupt

    print(CLEAR_SCREEN, end="")
    return [item for item in items if item in selected]


def prompt_settings(input_fn: InputFn = input, default_url: str = DEFAULT_API_URL) -> Settings:
    """Ask for the n8n connection details.

    ABOUTME: Re-prompts on an invalid auth type
    ABOUTME: Only asks for a username when basic auth is chosen

    Raises:
        ValueError: If a required value is left empty
    """
    api_url = input_fn(f"n8n URL [{default_url}]: ").strip() or default_url

    api_key = input_fn("API key (or password for basic auth): ").strip()
    if not api_key:
        raise ValueError("An API key is required")

    auth_type: AuthType
    while True:
        raw = input_fn("Auth type (apikey/bearer/basic) [apikey]: ").strip()
        try:
            auth_type = parse_auth_type(raw)
            break
        except ValueError as e:
            print(f"  {e}")

    api_user = None
    if auth_type == "basic":
        api_user = input_fn("Username: ").strip()
        if not api_user:
            raise ValueError("A username is required for basic auth")

    return Settings(api_url=api_url, api_key=api_key, auth_type=auth_type, api_user=api_user)


def configure_clients(clients: list[ClientInfo], entry: McpEntry) -> int:
    """Integrate the entry into each client, one after another.

    ABOUTME: Manual clients only get a snippet
    ABOUTME: A failing client prints its reason and snippet, then the next one runs

    Returns:
        Number of clients that needed manual follow-up
    """
    fallbacks = 0

    for client in clients:
        print()
        print(f"{BOLD}{client.name}{RESET}")

        if client.mode == "manual":
            print(manual_snippet(client, entry))
            continue

        try:
            result = integrate_client(client, entry)
        except OSError as e:
            logger.warning(f"{client.name}: could not write config: {e}")
            reason = f"Could not write {client.config_path}: {e}"
        else:
            if result.ok:
                target = client.config_path or client.name
                print(f"  {GREEN}✓{RESET} Entry {result.action} ({target})")
                continue
            reason = result.reason or "Integration failed"

        fallbacks += 1
        print(f"  {YELLOW}⊘{RESET} {reason}")
        print("  Configure manually:")
        print()
        print(manual_snippet(client, entry))

    return fallbacks


def cmd_setup(
    platform: str = sys.platform,
    input_fn: InputFn = input,
    select_fn: SelectFn = interactive_select,
    verify: bool = True,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Interactive setup: collect settings, detect clients, configure them.

    ABOUTME: The URL prompt defaults to N8N_API_URL when it is set
    ABOUTME: Connection check only warns, it never stops setup
    ABOUTME: Ctrl+C or a closed stdin at any point is an input error
    ABOUTME: Returns an exit code (see EXIT_* constants)
    """
    from n8nmcp import __version__

    print(f"tcs-n8n-mcp setup v{__version__}")
    print()

    env = environ if environ is not None else os.environ
    default_url = env.get("N8N_API_URL") or DEFAULT_API_URL

    try:
        settings = prompt_settings(input_fn, default_url)

        if verify:
            print()
            print(f"Checking connection to {settings.api_base}...")
            ok, message = check_connection(N8nClient(settings), settings.api_base)
            if ok:
                print(f"  {GREEN}✓{RESET} {message}")
            else:
                print(f"  {YELLOW}⚠{RESET} {message}")
                print("  Continuing, the server will use these values as entered.")

        clients = detect_clients(platform)
        by_name = {client.name: client for client in clients}
        preselected = {client.name for client in clients if client.mode != "manual"}

        print()
        print(f"Detected {len(clients)} client(s): {', '.join(by_name)}")
        chosen = select_fn(list(by_name), preselected)

        if not chosen:
            print()
            print("No clients selected. Nothing to do.")
            return EXIT_SUCCESS

        entry = build_mcp_config(platform, settings.to_env())
        fallbacks = configure_clients([by_name[name] for name in chosen], entry)

        print()
        if fallbacks:
            print(f"Setup finished: {len(chosen) - fallbacks}/{len(chosen)} client(s) configured automatically.")
            return EXIT_PARTIAL
        print("Setup finished. Restart your clients to load tcs-n8n-mcp.")
        return EXIT_SUCCESS

    except ValueError as e:
        print(f"Error: {e}")
        return EXIT_INPUT_ERROR
    except (KeyboardInterrupt, EOFError):
        print()
        print("Setup cancelled.")
        return EXIT_INPUT_ERROR
    except Exception as e:
        print(f"Fatal error: {e}")
        return EXIT_FATAL
