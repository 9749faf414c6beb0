# Core data models for n8nmcp setup
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

IntegrationMode = Literal["json", "cli", "manual"]
IntegrationAction = Literal["added", "updated"]


@dataclass(frozen=True)
class McpEntry:
    """Immutable MCP server registration entry (stdio transport).

    ABOUTME: Built once per setup session and handed unchanged to every client
    ABOUTME: Serializes to the {command, args, env} shape host configs expect
    """
    command: str
    args: list[str] = field(default_factory=list)
    env: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form of this entry."""
        return {
            "command": self.command,
            "args": list(self.args),
            "env": dict(self.env),
        }


@dataclass(frozen=True)
class PlatformPath:
    """Config path template for one operating system."""
    platform: Literal["win32", "darwin", "linux"]
    path: str


@dataclass(frozen=True)
class ClientSpec:
    """Static catalog entry describing a known MCP client.

    ABOUTME: Paths are relative to the home dir or start with %APPDATA%
    ABOUTME: Only json-mode clients carry path templates
    """
    name: str
    mode: IntegrationMode
    config_paths: tuple[PlatformPath, ...] = ()
    json_key: str | None = None


@dataclass(frozen=True)
class ClientInfo:
    """A client detected on the current system.

    ABOUTME: config_path is only set for json-mode clients
    """
    name: str
    mode: IntegrationMode
    config_path: Path | None = None
    json_key: str | None = None


@dataclass(frozen=True)
class IntegrationResult:
    """Outcome of integrating the entry into one client.

    ABOUTME: Success carries an action, failure carries a reason, never both
    """
    ok: bool
    action: IntegrationAction | None = None
    reason: str | None = None

    @classmethod
    def success(cls, action: IntegrationAction) -> "IntegrationResult":
        return cls(ok=True, action=action)

    @classmethod
    def failure(cls, reason: str) -> "IntegrationResult":
        return cls(ok=False, reason=reason)


@dataclass(frozen=True)
class FetchResponse:
    """Response from an n8n API request.

    ABOUTME: HTTP error statuses are responses too, check ok before using body
    """
    status: int
    reason: str = ""
    body: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self) -> Any | None:
        """Parse the body as JSON, None if it is not valid JSON."""
        try:
            return json.loads(self.body.decode("utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
