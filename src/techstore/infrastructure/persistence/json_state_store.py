"""JSON-file-backed implementation of StateStore.

The file holds one JSON object mapping each key to the *serialized* value
string, the same shape a browser's local storage has.  Nothing here
raises: a missing, unreadable or corrupt file reads as empty, and a
failed write is logged and dropped.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from techstore.domain.repository.state_store import StateStore

logger = logging.getLogger(__name__)


class JsonFileStateStore(StateStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- StateStore interface -------------------------------------------------

    def load(self, key: str, default: Any) -> Any:
        entries = self._read_entries()
        if key not in entries:
            return default
        try:
            return json.loads(entries[key])
        except (TypeError, ValueError):
            logger.warning("Stored value for %r is unreadable; using default", key)
            return default

    def save(self, key: str, value: Any) -> None:
        try:
            payload = json.dumps(value)
        except (TypeError, ValueError) as exc:
            logger.warning("Cannot serialize value for %r: %s", key, exc)
            return

        entries = self._read_entries()
        entries[key] = payload
        try:
            self._write_atomically(entries)
        except OSError as exc:
            logger.warning("Could not save %r to %s: %s", key, self._file_path, exc)

    # --- File helpers ---------------------------------------------------------

    def _write_atomically(self, entries: dict[str, Any]) -> None:
        """Write to a temp file beside the target, then swap it in."""
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_path = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=".session_", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(entries, f, indent=2, ensure_ascii=False)
                f.write("\n")
            os.replace(temp_path, self._file_path)
        except OSError:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise

    def _read_entries(self) -> dict[str, Any]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable state file %s: %s", self._file_path, exc)
            return {}
        if not isinstance(raw, dict):
            logger.warning("State file %s is not a JSON object; ignoring it", self._file_path)
            return {}
        return raw
