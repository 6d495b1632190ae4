# ABOUTME: Key/value stores for saved game snapshots
# ABOUTME: In-memory store for tests and single-process use, one-JSON-file-per-key store for disk

import json
import logging
import re
from pathlib import Path
from typing import Any, Optional, Protocol

from paintingguessr.config import Config

log = logging.getLogger(__name__)

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


class SessionStore(Protocol):
    def load(self, key: str) -> Optional[dict[str, Any]]:
        ...

    def save(self, key: str, snapshot: dict[str, Any]) -> None:
        ...


class InMemorySessionStore:
    """Dict-backed store; snapshots are copied through JSON so callers can't alias them."""

    def __init__(self):
        self._snapshots: dict[str, str] = {}

    def load(self, key: str) -> Optional[dict[str, Any]]:
        raw = self._snapshots.get(key)
        return json.loads(raw) if raw is not None else None

    def save(self, key: str, snapshot: dict[str, Any]) -> None:
        self._snapshots[key] = json.dumps(snapshot)


class JsonFileSessionStore:
    """
    One `<key>.json` file per snapshot under `directory`.

    A missing file loads as None. So does an unreadable or corrupt one, with
    a warning, so a damaged save starts a fresh game instead of crashing.
    """

    def __init__(self, directory=None):
        self.directory = Path(directory or Config.SESSION_STORE_DIR)

    def _path(self, key: str) -> Path:
        return self.directory / f"{_UNSAFE_KEY_CHARS.sub('_', key)}.json"

    def load(self, key: str) -> Optional[dict[str, Any]]:
        path = self._path(key)
        if not path.exists():
            return None

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            log.warning(f"Could not read saved session {path}: {e}")
            return None

        if not isinstance(data, dict):
            log.warning(f"Saved session {path} is not an object, ignoring")
            return None
        return data

    def save(self, key: str, snapshot: dict[str, Any]) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(json.dumps(snapshot, indent=2), encoding="utf-8")
        tmp_path.replace(path)
