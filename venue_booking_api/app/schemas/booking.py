"""
Pydantic models for venue reservations.

These schemas describe the persisted dataset (facilities, time slots
and reservations) as well as the request bodies and result shapes of
the booking API.  Serialized field names use camelCase
(``timeSlotId``, ``facilityNumber``...) so the stored blob and the HTTP
payloads keep the layout the reservation UI expects; Python code uses
the snake_case attribute names.  Both spellings are accepted on input.
"""

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class Facility(BaseModel):
    """A bookable venue category with ``count`` numbered courts."""

    type: str = Field(..., examples=["badminton"])
    count: int = Field(..., ge=1, examples=[6])
    name: str = Field(..., examples=["羽毛球场"])


class TimeSlot(BaseModel):
    id: str = Field(..., examples=["m1"])
    name: str = Field(..., examples=["8:00~10:00"])
    start: str = Field(..., description="Start time of day, HH:MM")
    end: str = Field(..., description="End time of day, HH:MM")


class Reservation(BaseModel):
    id: str
    name: str
    phone: str
    type: str
    date: str = Field(..., description="Calendar date, YYYY-MM-DD")
    time_slot_id: str = Field(..., alias="timeSlotId")
    # Copy of the slot name at booking time
    time_slot_name: str = Field(..., alias="timeSlotName")
    facility_number: int = Field(..., alias="facilityNumber")
    created_at: datetime = Field(..., alias="createdAt")

    model_config = {
        "populate_by_name": True,
    }


class Dataset(BaseModel):
    """The complete persisted state of the booking store."""

    facilities: List[Facility] = Field(default_factory=list)
    time_slots: List[TimeSlot] = Field(default_factory=list, alias="timeSlots")
    reservations: List[Reservation] = Field(default_factory=list)

    model_config = {
        "populate_by_name": True,
    }


class ReservationCreate(BaseModel):
    """Request body for ``POST /api/reserve``.

    Every field is optional at the schema level: completeness is a
    business rule checked by the store, which reports missing fields as
    a ``MISSING_FIELD`` error result rather than a validation failure.
    """

    name: Optional[str] = None
    phone: Optional[str] = None
    type: Optional[str] = None
    date: Optional[str] = None
    time_slot_id: Optional[str] = Field(default=None, alias="timeSlotId")
    facility_number: Optional[int] = Field(default=None, alias="facilityNumber")

    model_config = {
        "populate_by_name": True,
    }


class AvailableFacilities(BaseModel):
    total: int
    # Remaining courts per time slot id.  Not clamped at zero.
    available: Dict[str, int]


class ReserveResult(BaseModel):
    success: bool = True
    reservation: Reservation


class SuccessResult(BaseModel):
    success: bool = True


class BookingErrorCode(str, Enum):
    MISSING_FIELD = "MISSING_FIELD"
    UNKNOWN_FACILITY_TYPE = "UNKNOWN_FACILITY_TYPE"
    INVALID_FACILITY_NUMBER = "INVALID_FACILITY_NUMBER"
    UNKNOWN_TIME_SLOT = "UNKNOWN_TIME_SLOT"
    ALREADY_RESERVED = "ALREADY_RESERVED"
    NOT_FOUND = "NOT_FOUND"


class ErrorResult(BaseModel):
    """Error-shaped result returned instead of raising.

    ``error`` carries the user-facing message shown by the UI, ``code``
    the machine-readable category.
    """

    error: str
    code: BookingErrorCode
