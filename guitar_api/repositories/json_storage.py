"""
JSON-file persistence helpers.

The backing file is a single JSON array of objects. It is always read and
written as a whole.
"""

from __future__ import annotations

from pathlib import Path
import json


class StorageError(Exception):
    """Raised when the backing file cannot be read, parsed or written."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.message = message
        self.path = path


def load(path: Path) -> list[dict]:
    try:
        with Path(path).open("r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as exc:
        raise StorageError(f"could not read {path}: {exc}", path) from exc
    except json.JSONDecodeError as exc:
        raise StorageError(f"invalid JSON in {path}: {exc}", path) from exc
    if not isinstance(data, list):
        raise StorageError(f"{path} must contain a JSON array", path)
    for position, item in enumerate(data, start=1):
        if not isinstance(item, dict):
            raise StorageError(f"element {position} of {path} is not an object", path)
    return data


def save(path: Path, items: list[dict]) -> None:
    try:
        Path(path).write_text(json.dumps(items, ensure_ascii=False, indent=2), encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        raise StorageError(f"could not write {path}: {exc}", path) from exc
