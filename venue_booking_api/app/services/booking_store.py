"""
Business logic for venue reservations.

The ``BookingStore`` owns the whole booking dataset: facility types,
time slots and reservations.  The dataset is kept as one serialized
blob under a fixed key of a ``KeyValueStorage``.  Every operation
re-reads the blob, computes its result and, for mutations, writes the
whole blob back.  Operations are coroutines that complete after a
configurable delay so that clients experience the latency of a remote
API; tests construct the store with zero delay.

Validation failures never raise.  They are returned as ``ErrorResult``
values carrying the message shown to the user and a
``BookingErrorCode``.  Storage faults are not validation failures and
propagate to the caller.

Mutations on one store instance are serialised with an ``asyncio.Lock``
so overlapping ``reserve``/``cancel_reservation`` calls cannot overwrite
each other's writes.  Two store instances sharing one substrate (for
example two processes using the same SQLite file) are not coordinated
and the later write wins.
"""

import asyncio
import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional, Union

from pydantic import ValidationError

from venue_booking_api.app.core.config import Settings
from venue_booking_api.app.core.storage import KeyValueStorage, create_storage
from venue_booking_api.app.schemas.booking import (
    AvailableFacilities,
    BookingErrorCode,
    Dataset,
    ErrorResult,
    Facility,
    Reservation,
    ReserveResult,
    SuccessResult,
    TimeSlot,
)
from venue_booking_api.app.services.seed_data import build_seed_dataset


logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "venueBookingData"
DEFAULT_READ_DELAY = 0.3
DEFAULT_WRITE_DELAY = 0.5

# Bookable dates run from today + 2 to today + 7 inclusive.
FIRST_BOOKABLE_DAY = 2
LAST_BOOKABLE_DAY = 7

MSG_INCOMPLETE_RESERVATION = "请填写完整预约信息"
MSG_UNKNOWN_FACILITY_TYPE = "场地类型不存在"
MSG_INVALID_FACILITY_NUMBER = "无效的场地编号"
MSG_UNKNOWN_TIME_SLOT = "时间段不存在"
MSG_ALREADY_RESERVED = "该场地已被预约"
MSG_PHONE_REQUIRED = "请提供手机号"
MSG_INCOMPLETE_CANCELLATION = "参数不完整"
MSG_RESERVATION_NOT_FOUND = "预约记录不存在"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_reservation_id() -> str:
    return uuid.uuid4().hex


def _error(code: BookingErrorCode, message: str) -> ErrorResult:
    logger.debug("Booking request rejected (%s): %s", code.value, message)
    return ErrorResult(error=message, code=code)


class BookingStore:
    """Sole owner of the booking dataset.

    Parameters
    ----------
    storage : KeyValueStorage
        Substrate holding the serialized dataset.
    storage_key : str
        Key the dataset blob is stored under.
    read_delay, write_delay : float
        Simulated latency in seconds for read and write operations.
    clock : Callable[[], datetime], optional
        Returns the current time as an aware UTC datetime.  Used for
        ``createdAt`` stamps and for the list of bookable dates.
    id_factory : Callable[[], str], optional
        Generates reservation identifiers.  Defaults to random UUIDs.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        storage_key: str = DEFAULT_STORAGE_KEY,
        read_delay: float = DEFAULT_READ_DELAY,
        write_delay: float = DEFAULT_WRITE_DELAY,
        clock: Optional[Callable[[], datetime]] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ) -> None:
        self.storage = storage
        self.storage_key = storage_key
        self.read_delay = read_delay
        self.write_delay = write_delay
        self._clock = clock or _utcnow
        self._id_factory = id_factory or _new_reservation_id
        self._lock = asyncio.Lock()

    # ------------------------------------------------------------------
    # Persistence helpers
    # ------------------------------------------------------------------
    def load_dataset(self) -> Dataset:
        """Read the dataset from storage.

        A missing blob yields an empty dataset.  So does an unreadable
        one, after logging a warning.
        """
        raw = self.storage.get(self.storage_key)
        if raw is None:
            return Dataset()
        try:
            return Dataset.model_validate_json(raw)
        except ValidationError as exc:
            logger.warning("Stored dataset under %r is unreadable: %s", self.storage_key, exc)
            return Dataset()

    def _save_dataset(self, dataset: Dataset) -> None:
        self.storage.set(self.storage_key, dataset.model_dump_json(by_alias=True))

    async def _simulate_latency(self, delay: float) -> None:
        if delay > 0:
            await asyncio.sleep(delay)

    @staticmethod
    def _find_facility(dataset: Dataset, facility_type: str) -> Optional[Facility]:
        return next((f for f in dataset.facilities if f.type == facility_type), None)

    @staticmethod
    def _find_time_slot(dataset: Dataset, time_slot_id: str) -> Optional[TimeSlot]:
        return next((s for s in dataset.time_slots if s.id == time_slot_id), None)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    async def initialize(self) -> None:
        """Write the seed dataset unless one is already persisted."""
        async with self._lock:
            self._seed_if_absent()

    def _seed_if_absent(self) -> bool:
        if self.storage.get(self.storage_key) is not None:
            return False
        self._save_dataset(build_seed_dataset())
        logger.info("Seeded booking dataset under key %r", self.storage_key)
        return True

    async def reset(self, reseed: bool = True) -> None:
        """Delete the persisted dataset, optionally writing the seed again."""
        async with self._lock:
            self.storage.delete(self.storage_key)
            logger.warning("Booking dataset under key %r was reset", self.storage_key)
            if reseed:
                self._seed_if_absent()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    async def list_facilities(self) -> List[Facility]:
        await self._simulate_latency(self.read_delay)
        return self.load_dataset().facilities

    async def list_time_slots(self) -> List[TimeSlot]:
        await self._simulate_latency(self.read_delay)
        return self.load_dataset().time_slots

    async def list_available_dates(self) -> List[str]:
        """Return the bookable dates (YYYY-MM-DD), ascending."""
        await self._simulate_latency(self.read_delay)
        today = self._clock().date()
        return [
            (today + timedelta(days=offset)).isoformat()
            for offset in range(FIRST_BOOKABLE_DAY, LAST_BOOKABLE_DAY + 1)
        ]

    async def get_available_facilities(
        self, date: str, facility_type: str
    ) -> Union[AvailableFacilities, ErrorResult]:
        """Count the free courts of ``facility_type`` per time slot on ``date``.

        The remaining count is the facility total minus the number of
        reservations for that date, type and slot.  It is not clamped,
        so an over-booked slot reports a negative number.
        """
        await self._simulate_latency(self.read_delay)
        dataset = self.load_dataset()
        facility = self._find_facility(dataset, facility_type)
        if facility is None:
            return _error(BookingErrorCode.UNKNOWN_FACILITY_TYPE, MSG_UNKNOWN_FACILITY_TYPE)

        available = {}
        for slot in dataset.time_slots:
            booked = sum(
                1
                for r in dataset.reservations
                if r.date == date and r.type == facility_type and r.time_slot_id == slot.id
            )
            available[slot.id] = facility.count - booked
        return AvailableFacilities(total=facility.count, available=available)

    async def list_reservations_by_phone(
        self, phone: Optional[str]
    ) -> Union[List[Reservation], ErrorResult]:
        await self._simulate_latency(self.read_delay)
        if not phone:
            return _error(BookingErrorCode.MISSING_FIELD, MSG_PHONE_REQUIRED)
        return [r for r in self.load_dataset().reservations if r.phone == phone]

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    async def reserve(
        self,
        name: Optional[str],
        phone: Optional[str],
        facility_type: Optional[str],
        date: Optional[str],
        time_slot_id: Optional[str],
        facility_number: Optional[int],
    ) -> Union[ReserveResult, ErrorResult]:
        """Book court ``facility_number`` of ``facility_type`` for one slot.

        Checks run in a fixed order and the first failure is returned:
        completeness (a facility number of 0 counts as missing), facility
        type, facility number range, time slot, then conflict with an
        existing reservation of the same type, date, slot and number.
        """
        await self._simulate_latency(self.write_delay)
        if not all([name, phone, facility_type, date, time_slot_id, facility_number]):
            return _error(BookingErrorCode.MISSING_FIELD, MSG_INCOMPLETE_RESERVATION)

        async with self._lock:
            dataset = self.load_dataset()

            facility = self._find_facility(dataset, facility_type)
            if facility is None:
                return _error(BookingErrorCode.UNKNOWN_FACILITY_TYPE, MSG_UNKNOWN_FACILITY_TYPE)

            if facility_number < 1 or facility_number > facility.count:
                return _error(BookingErrorCode.INVALID_FACILITY_NUMBER, MSG_INVALID_FACILITY_NUMBER)

            time_slot = self._find_time_slot(dataset, time_slot_id)
            if time_slot is None:
                return _error(BookingErrorCode.UNKNOWN_TIME_SLOT, MSG_UNKNOWN_TIME_SLOT)

            conflicted = any(
                r.type == facility_type
                and r.date == date
                and r.time_slot_id == time_slot_id
                and r.facility_number == facility_number
                for r in dataset.reservations
            )
            if conflicted:
                return _error(BookingErrorCode.ALREADY_RESERVED, MSG_ALREADY_RESERVED)

            reservation = Reservation(
                id=self._id_factory(),
                name=name,
                phone=phone,
                type=facility_type,
                date=date,
                time_slot_id=time_slot_id,
                time_slot_name=time_slot.name,
                facility_number=facility_number,
                created_at=self._clock(),
            )
            dataset.reservations.append(reservation)
            self._save_dataset(dataset)

        logger.info(
            "Reserved %s #%s on %s slot %s (reservation %s)",
            facility_type, facility_number, date, time_slot_id, reservation.id,
        )
        return ReserveResult(reservation=reservation)

    async def cancel_reservation(
        self, reservation_id: Optional[str], phone: Optional[str]
    ) -> Union[SuccessResult, ErrorResult]:
        """Remove the first reservation matching both id and phone."""
        await self._simulate_latency(self.write_delay)
        if not reservation_id or not phone:
            return _error(BookingErrorCode.MISSING_FIELD, MSG_INCOMPLETE_CANCELLATION)

        async with self._lock:
            dataset = self.load_dataset()
            index = next(
                (
                    i
                    for i, r in enumerate(dataset.reservations)
                    if r.id == reservation_id and r.phone == phone
                ),
                None,
            )
            if index is None:
                return _error(BookingErrorCode.NOT_FOUND, MSG_RESERVATION_NOT_FOUND)
            del dataset.reservations[index]
            self._save_dataset(dataset)

        logger.info("Cancelled reservation %s", reservation_id)
        return SuccessResult()


def create_booking_store(app_settings: Settings) -> BookingStore:
    """Build a store on the storage backend and latency given in ``app_settings``.

    For the ``sqlite`` backend this creates and migrates the database
    file if it does not exist yet.
    """
    return BookingStore(
        create_storage(app_settings),
        storage_key=app_settings.storage_key,
        read_delay=app_settings.read_delay,
        write_delay=app_settings.write_delay,
    )
