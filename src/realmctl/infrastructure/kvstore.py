"""File-backed key-value store of UTF-8 text values.

A flat mapping of string keys to string values that survives restarts.
The whole mapping is one JSON object on disk. Every :meth:`KeyValueStore.set` is a
synchronous write-through via temp file + rename, so a crash mid-write
leaves the previous file intact.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


class KeyValueStore:
    """String-to-string store persisted as a single JSON object file."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def get(self, key: str) -> str | None:
        """Return the stored value for *key*, or None if absent."""
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        """Store *value* under *key*, writing through to disk immediately."""
        data = self._read()
        data[key] = value
        self._write(data)
        logger.debug("Stored key %s (%d chars)", key, len(value))

    def delete(self, key: str) -> bool:
        """Remove *key*. Returns True if it existed."""
        data = self._read()
        if key not in data:
            return False
        del data[key]
        self._write(data)
        return True

    def keys(self) -> list[str]:
        return sorted(self._read())

    # ------------------------------------------------------------------
    # File I/O
    # ------------------------------------------------------------------

    def _read(self) -> dict[str, str]:
        if not self.path.is_file():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable store file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring store file without a top-level object: %s", self.path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
