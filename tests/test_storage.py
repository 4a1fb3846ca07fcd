"""
Contract tests for KeyValueStorage implementations.

Runs against MemoryStorage, JsonFileStorage and SqliteStorage.
"""

import pytest

from tests.contracts.storage_contract import KeyValueStorageContract
from venue_booking_api.app.core.config import Settings
from venue_booking_api.app.core.db import init_db
from venue_booking_api.app.core.storage import (
    JsonFileStorage,
    MemoryStorage,
    SqliteStorage,
    create_storage,
)


class TestMemoryStorage(KeyValueStorageContract):

    def create_storage(self):
        return MemoryStorage()

    def test_isolation_between_instances(self):
        """Two in-memory instances must not share state."""
        s1 = MemoryStorage()
        s2 = MemoryStorage()
        s1.set("k", "v")
        assert s2.get("k") is None


class TestJsonFileStorage(KeyValueStorageContract):

    @pytest.fixture(autouse=True)
    def _tmp(self, tmp_path):
        self.path = tmp_path / "data" / "booking.json"

    def create_storage(self):
        return JsonFileStorage(str(self.path))

    def test_missing_file_reads_as_empty(self):
        storage = self.create_storage()
        assert not self.path.exists()
        assert storage.get("k") is None

    def test_data_survives_new_instance(self):
        self.create_storage().set("k", "v")
        assert JsonFileStorage(str(self.path)).get("k") == "v"


class TestSqliteStorage(KeyValueStorageContract):

    @pytest.fixture(autouse=True)
    def _tmp(self, tmp_path):
        self.db_path = str(tmp_path / "booking.db")

    def create_storage(self):
        return SqliteStorage(self.db_path)

    def test_data_survives_new_instance(self):
        self.create_storage().set("k", "v")
        assert SqliteStorage(self.db_path).get("k") == "v"

    def test_migrations_are_applied_once(self):
        assert init_db(self.db_path) == 1
        assert init_db(self.db_path) == 1


class TestCreateStorage:

    def test_memory_backend(self):
        assert isinstance(create_storage(Settings(storage_backend="memory")), MemoryStorage)

    def test_file_backend(self, tmp_path):
        path = str(tmp_path / "booking.json")
        storage = create_storage(Settings(storage_backend="file", storage_path=path))
        assert isinstance(storage, JsonFileStorage)
        assert str(storage.path) == path

    def test_sqlite_backend(self, tmp_path):
        path = str(tmp_path / "booking.db")
        storage = create_storage(Settings(storage_backend="SQLite", storage_path=path))
        assert isinstance(storage, SqliteStorage)
        assert storage.db_path == path

    def test_unknown_backend_raises(self):
        with pytest.raises(ValueError, match="redis"):
            create_storage(Settings(storage_backend="redis"))
