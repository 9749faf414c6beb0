# JSON document helpers for host client config files
import json
from pathlib import Path
from typing import Any


def read_json_document(path: Path) -> Any:
    """Read and parse a JSON file.

    ABOUTME: Returns whatever JSON value the file holds, callers narrow it
    ABOUTME: Raises ValueError for invalid JSON or non UTF-8 content
    ABOUTME: OSError (missing file, permissions) propagates unchanged
    """
    raw = path.read_bytes()
    try:
        return json.loads(raw.decode("utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e


def write_json_document(path: Path, data: dict[str, Any]) -> None:
    """Replace a JSON file's content with the given document.

    ABOUTME: Creates parent directories if needed
    ABOUTME: 2-space indentation, key order preserved, trailing newline
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        f.write(json.dumps(data, indent=2, ensure_ascii=False) + "\n")
