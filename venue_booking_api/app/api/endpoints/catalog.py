"""
Catalog endpoints.

Read-only routes describing what can be booked: facility types, time
slots, bookable dates and the per-slot availability of a facility type
on a given date.  These routes are publicly accessible.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from venue_booking_api.app.api.deps import error_response, get_booking_store
from venue_booking_api.app.schemas.booking import AvailableFacilities, ErrorResult, Facility, TimeSlot
from venue_booking_api.app.services.booking_store import BookingStore


router = APIRouter()


@router.get("/facilities", response_model=List[Facility])
async def list_facilities(store: BookingStore = Depends(get_booking_store)) -> List[Facility]:
    """Return all facility types in their configured order."""
    return await store.list_facilities()


@router.get("/time-slots", response_model=List[TimeSlot])
async def list_time_slots(store: BookingStore = Depends(get_booking_store)) -> List[TimeSlot]:
    """Return all time slots in their configured order."""
    return await store.list_time_slots()


@router.get("/available-dates", response_model=List[str])
async def list_available_dates(store: BookingStore = Depends(get_booking_store)) -> List[str]:
    """Return the six bookable dates, from two to seven days ahead."""
    return await store.list_available_dates()


@router.get(
    "/available-facilities",
    response_model=AvailableFacilities,
    responses={404: {"model": ErrorResult}},
)
async def get_available_facilities(
    date: Optional[str] = Query(None, description="Calendar date, YYYY-MM-DD"),
    type: Optional[str] = Query(None, description="Facility type identifier"),
    store: BookingStore = Depends(get_booking_store),
):
    """Return the total court count and the remaining courts per time slot.

    An unknown facility type yields HTTP 404 with an error body.
    """
    result = await store.get_available_facilities(date, type)
    if isinstance(result, ErrorResult):
        return error_response(result)
    return result
