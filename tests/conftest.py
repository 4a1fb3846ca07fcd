import itertools
from datetime import datetime, timezone

import pytest

from venue_booking_api.app.core.storage import MemoryStorage
from venue_booking_api.app.services.booking_store import DEFAULT_STORAGE_KEY, BookingStore
from venue_booking_api.app.services.seed_data import build_seed_dataset


NOW = datetime(2024, 5, 30, 9, 15, tzinfo=timezone.utc)


def make_store(storage=None, **kwargs) -> BookingStore:
    """Store with no latency, a fixed clock and ids r1, r2, ..."""
    counter = itertools.count(1)
    kwargs.setdefault("clock", lambda: NOW)
    kwargs.setdefault("id_factory", lambda: f"r{next(counter)}")
    return BookingStore(
        storage if storage is not None else MemoryStorage(),
        read_delay=0,
        write_delay=0,
        **kwargs,
    )


def seed(storage, key=DEFAULT_STORAGE_KEY):
    storage.set(key, build_seed_dataset().model_dump_json(by_alias=True))


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage):
    seed(storage)
    return make_store(storage)
