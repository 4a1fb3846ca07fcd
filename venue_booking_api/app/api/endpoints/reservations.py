"""
Reservation endpoints.

These routes create reservations, list the reservations made with a
phone number and cancel a reservation.  They rely on the
``BookingStore`` for validation and conflict checks; rejected requests
are answered with the store's error result and a matching HTTP status.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query

from venue_booking_api.app.api.deps import error_response, get_booking_store
from venue_booking_api.app.schemas.booking import (
    ErrorResult,
    Reservation,
    ReservationCreate,
    ReserveResult,
    SuccessResult,
)
from venue_booking_api.app.services.booking_store import BookingStore


router = APIRouter()


@router.post(
    "/reserve",
    response_model=ReserveResult,
    responses={400: {"model": ErrorResult}, 404: {"model": ErrorResult}, 409: {"model": ErrorResult}},
)
async def reserve(
    booking: ReservationCreate,
    store: BookingStore = Depends(get_booking_store),
):
    """Book a numbered court for one time slot on one date.

    Missing fields and an out-of-range court number give HTTP 400, an
    unknown facility type or time slot HTTP 404, and a court that is
    already taken HTTP 409.
    """
    result = await store.reserve(
        booking.name,
        booking.phone,
        booking.type,
        booking.date,
        booking.time_slot_id,
        booking.facility_number,
    )
    if isinstance(result, ErrorResult):
        return error_response(result)
    return result


@router.get(
    "/reservations",
    response_model=List[Reservation],
    responses={400: {"model": ErrorResult}},
)
async def list_reservations(
    phone: Optional[str] = Query(None, description="Phone number used when booking"),
    store: BookingStore = Depends(get_booking_store),
):
    """List reservations made with ``phone``, oldest first."""
    result = await store.list_reservations_by_phone(phone)
    if isinstance(result, ErrorResult):
        return error_response(result)
    return result


@router.delete(
    "/reservations/{reservation_id}",
    response_model=SuccessResult,
    responses={400: {"model": ErrorResult}, 404: {"model": ErrorResult}},
)
async def cancel_reservation(
    reservation_id: str = Path(..., description="ID of the reservation"),
    phone: Optional[str] = Query(None, description="Phone number used when booking"),
    store: BookingStore = Depends(get_booking_store),
):
    """Cancel a reservation.

    The phone number must match the one the reservation was made with;
    otherwise the reservation is reported as not found.
    """
    result = await store.cancel_reservation(reservation_id, phone)
    if isinstance(result, ErrorResult):
        return error_response(result)
    return result
