"""
Durable key-value storage for client state.

This module provides the local persistence used by the favorites store: a single
JSON document on disk mapping string keys to string values, the same contract as
a browser's localStorage. Values are opaque strings; callers serialize themselves.

InMemoryStorage offers the same interface for tests and for sessions that should
not touch the disk.

Note: every write replaces the whole document via a temporary file and os.replace.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Union

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """Raised when the storage file cannot be written."""


class InMemoryStorage:
    """Process-local key-value storage."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStorage:
    """
    Key-value storage backed by one JSON file.

    The file is read lazily on first access. A missing, unreadable or malformed file
    reads as empty; it is overwritten on the next successful write.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._cache: Optional[Dict[str, str]] = None

    def _load(self) -> Dict[str, str]:
        if self._cache is not None:
            return self._cache

        data: Dict[str, str] = {}
        try:
            if self.path.exists():
                with self.path.open("r", encoding="utf-8") as f:
                    raw = json.load(f)
                if isinstance(raw, dict):
                    data = {str(k): v for k, v in raw.items() if isinstance(v, str)}
                else:
                    logger.warning("Ignoring storage file %s: expected an object, got %s",
                                   self.path, type(raw).__name__)
        except (OSError, ValueError) as e:
            logger.warning("Could not read storage file %s: %s", self.path, e)

        self._cache = data
        return data

    def _flush(self, data: Dict[str, str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=str(self.path.parent), prefix=".storage-", suffix=".json")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, ensure_ascii=False, indent=2)
                os.replace(tmp_name, self.path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            raise StorageError(f"Could not write storage file {self.path}: {e}") from e

    def get_item(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        """
        Store a value and persist the whole document.

        Raises:
            StorageError: If the file cannot be written. The in-memory value is kept.
        """
        data = self._load()
        data[key] = value
        self._flush(data)

    def remove_item(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._flush(data)
