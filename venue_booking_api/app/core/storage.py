"""
Key/value persistence substrate for the booking dataset.

The booking store only needs to read and write one serialized blob
under a fixed key, the way the browser mock used ``localStorage``.
``KeyValueStorage`` is that contract; the concrete backends keep the
blob in a dict, in a JSON file or in an SQLite table.  Which one is
used is decided by ``create_storage`` from the application settings,
so call sites never depend on a particular backend.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from .config import Settings
from .db import get_connection, get_database_path, init_db


class KeyValueStorage(ABC):
    """Get/set-by-key string store."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove ``key``.  Missing keys are ignored."""
        ...


class MemoryStorage(KeyValueStorage):
    """Dict-backed storage.  Contents are lost when the process exits."""

    def __init__(self) -> None:
        self._data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStorage(KeyValueStorage):
    """Storage backed by a single JSON document mapping keys to values.

    The whole document is read on every ``get`` and rewritten on every
    ``set``.  A missing file behaves like an empty store.  A file that
    is not valid JSON is a storage fault: every operation raises
    ``json.JSONDecodeError``.  This differs from a well-formed document
    whose dataset value cannot be parsed, which ``BookingStore`` reads
    as an empty dataset.
    """

    def __init__(self, path: str) -> None:
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _dump(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._dump(data)

    def delete(self, key: str) -> None:
        data = self._load()
        if data.pop(key, None) is not None:
            self._dump(data)


class SqliteStorage(KeyValueStorage):
    """Storage backed by the ``kv_store`` table of an SQLite database."""

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path
        init_db(db_path)

    def get(self, key: str) -> Optional[str]:
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(
                "SELECT value FROM kv_store WHERE key = ?", (key,)
            ).fetchone()
            return row["value"] if row else None
        finally:
            conn.close()

    def set(self, key: str, value: str) -> None:
        conn = get_connection(self.db_path)
        try:
            conn.execute(
                "INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, CURRENT_TIMESTAMP)"
                " ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at",
                (key, value),
            )
            conn.commit()
        finally:
            conn.close()

    def delete(self, key: str) -> None:
        conn = get_connection(self.db_path)
        try:
            conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
            conn.commit()
        finally:
            conn.close()


def create_storage(settings: Settings) -> KeyValueStorage:
    """Build the storage backend selected by ``settings.storage_backend``."""
    backend = settings.storage_backend.lower()
    if backend == "memory":
        return MemoryStorage()
    if backend == "file":
        return JsonFileStorage(get_database_path(settings.storage_path))
    if backend == "sqlite":
        return SqliteStorage(get_database_path(settings.storage_path))
    raise ValueError(f"Unknown storage backend: {settings.storage_backend}")


__all__ = [
    "KeyValueStorage",
    "MemoryStorage",
    "JsonFileStorage",
    "SqliteStorage",
    "create_storage",
]
