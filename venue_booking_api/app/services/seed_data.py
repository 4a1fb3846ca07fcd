"""Initial dataset written the first time the store is initialised."""

from venue_booking_api.app.schemas.booking import Dataset, Facility, TimeSlot


FACILITIES = [
    Facility(type="badminton", count=6, name="羽毛球场"),
    Facility(type="volleyball", count=6, name="排球场"),
    Facility(type="tableTennis", count=20, name="乒乓球场"),
    Facility(type="basketball", count=6, name="篮球场"),
    Facility(type="football", count=1, name="足球场"),
]

TIME_SLOTS = [
    TimeSlot(id="m1", name="8:00~10:00", start="08:00", end="10:00"),
    TimeSlot(id="m2", name="10:00~12:00", start="10:00", end="12:00"),
    TimeSlot(id="a1", name="14:00~16:00", start="14:00", end="16:00"),
    TimeSlot(id="a2", name="16:00~18:00", start="16:00", end="18:00"),
    TimeSlot(id="e1", name="19:30~21:30", start="19:30", end="21:30"),
]


def build_seed_dataset() -> Dataset:
    """Return a fresh copy of the seed dataset with no reservations."""
    return Dataset(
        facilities=[f.model_copy() for f in FACILITIES],
        time_slots=[s.model_copy() for s in TIME_SLOTS],
        reservations=[],
    )
