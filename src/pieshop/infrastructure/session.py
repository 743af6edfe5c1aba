"""File-backed visitor sessions.

A session is a flat ``str -> str`` mapping persisted as JSON under
``{shop_root}/.pieshop/sessions/{name}.json``. Writes go straight to disk
(temp file + rename) so the next CLI invocation sees them.
"""

from __future__ import annotations

import json
import logging
import os
import re
from collections.abc import Iterator, MutableMapping
from pathlib import Path

from pieshop.infrastructure.database.engine import DATA_DIRNAME

SESSION_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}$")

logger = logging.getLogger(__name__)


def session_path(shop_root: Path, name: str) -> Path:
    """Resolve the JSON file backing session *name*.

    Raises:
        ValueError: If *name* is not a plain identifier (no path separators).
    """
    if not SESSION_NAME_PATTERN.match(name):
        msg = f"Invalid session name: {name!r}. Use letters, digits, '-' or '_'."
        raise ValueError(msg)
    return shop_root / DATA_DIRNAME / "sessions" / f"{name}.json"


class FileSessionStore(MutableMapping[str, str]):
    """Session key/value store persisted to a JSON file."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._data: dict[str, str] = self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, str]:
        if not self._path.is_file():
            return {}
        raw = self._path.read_text(encoding="utf-8")
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Discarding unreadable session file %s", self._path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Discarding non-object session file %s", self._path)
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _flush(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(".json.tmp")
        tmp.write_text(json.dumps(self._data, indent=2, sort_keys=True), encoding="utf-8")
        os.replace(tmp, self._path)

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._data[key] = value
        self._flush()

    def __delitem__(self, key: str) -> None:
        del self._data[key]
        self._flush()

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"FileSessionStore({str(self._path)!r})"


def open_session(shop_root: Path, name: str) -> FileSessionStore:
    """Open (or lazily create) the named visitor session for a shop."""
    return FileSessionStore(session_path(shop_root, name))
