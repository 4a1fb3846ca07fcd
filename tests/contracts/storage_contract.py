"""
Adapter contract for KeyValueStorage.

Any implementation (in-memory, JSON file, SQLite, ...) must pass these tests.
"""

from abc import ABC, abstractmethod

from venue_booking_api.app.core.storage import KeyValueStorage


class KeyValueStorageContract(ABC):

    @abstractmethod
    def create_storage(self) -> KeyValueStorage:
        """Return a fresh, empty storage instance."""
        ...

    def test_set_and_get(self):
        storage = self.create_storage()
        storage.set("venueBookingData", '{"facilities": []}')
        assert storage.get("venueBookingData") == '{"facilities": []}'

    def test_unknown_key_returns_none(self):
        storage = self.create_storage()
        assert storage.get("missing") is None

    def test_overwrite_replaces_value(self):
        storage = self.create_storage()
        storage.set("k", "first")
        storage.set("k", "second")
        assert storage.get("k") == "second"

    def test_keys_are_independent(self):
        storage = self.create_storage()
        storage.set("a", "1")
        storage.set("b", "2")
        assert storage.get("a") == "1"
        assert storage.get("b") == "2"

    def test_delete_removes_key(self):
        storage = self.create_storage()
        storage.set("k", "v")
        storage.delete("k")
        assert storage.get("k") is None

    def test_delete_missing_key_is_ignored(self):
        storage = self.create_storage()
        storage.delete("never-set")
        assert storage.get("never-set") is None

    def test_non_ascii_values_survive(self):
        storage = self.create_storage()
        storage.set("k", '{"name": "羽毛球场"}')
        assert storage.get("k") == '{"name": "羽毛球场"}'
