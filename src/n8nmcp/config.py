# Environment configuration and auth header construction for the n8n API
import base64
import os
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Literal, cast

from n8nmcp.models import FetchResponse

AuthType = Literal["apikey", "bearer", "basic"]

VALID_AUTH_TYPES: tuple[AuthType, ...] = ("apikey", "bearer", "basic")

DEFAULT_API_URL = "http://localhost:5678"
DEFAULT_TIMEOUT_MS = 30_000

# ABOUTME: Header injection guard for basic auth credentials
CONTROL_CHAR_PATTERN = re.compile(r"[\r\n\0]")
LEADING_INT_PATTERN = re.compile(r"\s*([+-]?\d+)")


def parse_auth_type(raw: str | None) -> AuthType:
    """Parse and validate N8N_AUTH_TYPE.

    ABOUTME: Defaults to "apikey" when unset or empty
    ABOUTME: Case-insensitive

    Raises:
        ValueError: If the value is not a supported auth type
    """
    value = (raw or "apikey").lower()
    if value not in VALID_AUTH_TYPES:
        raise ValueError(
            f'Invalid N8N_AUTH_TYPE "{raw}". Must be one of: {", ".join(VALID_AUTH_TYPES)}'
        )
    return cast(AuthType, value)


def build_auth_headers(
    auth_type: AuthType,
    api_key: str,
    api_user: str | None = None,
) -> dict[str, str]:
    """Build the authentication headers for n8n API requests.

    ABOUTME: apikey -> X-N8N-API-KEY, bearer/basic -> Authorization
    ABOUTME: basic needs a username and rejects control characters

    Args:
        auth_type: Parsed auth type
        api_key: API key, token or password depending on auth_type
        api_user: Username for basic auth

    Returns:
        Header name to value mapping

    Raises:
        ValueError: If basic auth is missing a user or credentials are unsafe

    Examples:
        >>> build_auth_headers("basic", "pass", "user")
        {'Authorization': 'Basic dXNlcjpwYXNz'}
    """
    if auth_type == "apikey":
        return {"X-N8N-API-KEY": api_key}
    if auth_type == "bearer":
        return {"Authorization": f"Bearer {api_key}"}

    if not api_user:
        raise ValueError("N8N_API_USER is required when N8N_AUTH_TYPE is 'basic'")
    if CONTROL_CHAR_PATTERN.search(api_user) or CONTROL_CHAR_PATTERN.search(api_key):
        raise ValueError(
            "Invalid credentials: username and password must not contain control characters"
        )
    encoded = base64.b64encode(f"{api_user}:{api_key}".encode("utf-8")).decode("ascii")
    return {"Authorization": f"Basic {encoded}"}


def parse_timeout_ms(raw: str | None) -> int:
    """Parse N8N_TIMEOUT_MS into a positive integer.

    ABOUTME: Reads the leading integer, so "12.5" is 12 and "100ms" is 100
    ABOUTME: Falls back to 30000 for missing, non-numeric or non-positive values
    """
    match = LEADING_INT_PATTERN.match(raw or "")
    if match is None:
        return DEFAULT_TIMEOUT_MS
    value = int(match.group(1))
    if value <= 0:
        return DEFAULT_TIMEOUT_MS
    return value


@dataclass(frozen=True)
class Settings:
    """n8n connection settings loaded from the environment.

    ABOUTME: Mirrors the N8N_* variables written into client configs
    """
    api_url: str
    api_key: str
    auth_type: AuthType = "apikey"
    api_user: str | None = None
    timeout_ms: int = DEFAULT_TIMEOUT_MS

    @property
    def api_base(self) -> str:
        """REST API root, e.g. http://localhost:5678/api/v1."""
        return f"{self.api_url.rstrip('/')}/api/v1"

    @property
    def headers(self) -> dict[str, str]:
        return build_auth_headers(self.auth_type, self.api_key, self.api_user)

    def to_env(self) -> dict[str, str]:
        """Environment map for the MCP entry.

        ABOUTME: Auth type and user are only included when not the default
        """
        env = {
            "N8N_API_URL": self.api_url,
            "N8N_API_KEY": self.api_key,
        }
        if self.auth_type != "apikey":
            env["N8N_AUTH_TYPE"] = self.auth_type
        if self.auth_type == "basic" and self.api_user:
            env["N8N_API_USER"] = self.api_user
        return env


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Load settings from N8N_* environment variables.

    ABOUTME: Fail-fast on a missing key or invalid auth configuration

    Raises:
        ValueError: If N8N_API_KEY is missing or auth settings are invalid
    """
    env = environ if environ is not None else os.environ

    api_key = env.get("N8N_API_KEY", "")
    if not api_key:
        raise ValueError("N8N_API_KEY environment variable is required")

    settings = Settings(
        api_url=env.get("N8N_API_URL") or DEFAULT_API_URL,
        api_key=api_key,
        auth_type=parse_auth_type(env.get("N8N_AUTH_TYPE")),
        api_user=env.get("N8N_API_USER") or None,
        timeout_ms=parse_timeout_ms(env.get("N8N_TIMEOUT_MS")),
    )
    # Fail on unusable basic auth now rather than on the first request
    build_auth_headers(settings.auth_type, settings.api_key, settings.api_user)
    return settings


def check_connection(
    fetch: Callable[[str], FetchResponse],
    base_url: str = "n8n API",
) -> tuple[bool, str]:
    """Probe the n8n API to verify credentials and connectivity.

    ABOUTME: Lists a single workflow, any 2xx counts as connected
    ABOUTME: Never raises, errors come back as (False, message)

    Args:
        fetch: Request function taking an API path
        base_url: Label for the success message, usually Settings.api_base

    Returns:
        Tuple of (success, message)
    """
    try:
        response = fetch("/workflows?limit=1")
    except Exception as e:
        return False, f"{e}. Verify N8N_API_URL is reachable."

    if not response.ok:
        return False, (
            f"HTTP {response.status} {response.reason or ''}. "
            "Verify N8N_API_URL and credentials are correct."
        )
    return True, f"Connected to {base_url}"

