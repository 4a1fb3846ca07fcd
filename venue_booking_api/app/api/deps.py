"""
Shared helpers for the API routes.

``get_booking_store`` is the FastAPI dependency handing each request the
store created by ``create_app``.  ``error_response`` turns an
``ErrorResult`` into an HTTP response: the body keeps the
``{"error": ..., "code": ...}`` shape the reservation UI reads, and the
status code reflects the error category.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from venue_booking_api.app.schemas.booking import BookingErrorCode, ErrorResult
from venue_booking_api.app.services.booking_store import BookingStore


ERROR_STATUS_CODES: dict[BookingErrorCode, int] = {
    BookingErrorCode.MISSING_FIELD: status.HTTP_400_BAD_REQUEST,
    BookingErrorCode.INVALID_FACILITY_NUMBER: status.HTTP_400_BAD_REQUEST,
    BookingErrorCode.UNKNOWN_FACILITY_TYPE: status.HTTP_404_NOT_FOUND,
    BookingErrorCode.UNKNOWN_TIME_SLOT: status.HTTP_404_NOT_FOUND,
    BookingErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    BookingErrorCode.ALREADY_RESERVED: status.HTTP_409_CONFLICT,
}


def get_booking_store(request: Request) -> BookingStore:
    return request.app.state.booking_store


def error_response(result: ErrorResult) -> JSONResponse:
    return JSONResponse(
        status_code=ERROR_STATUS_CODES.get(result.code, status.HTTP_400_BAD_REQUEST),
        content=result.model_dump(mode="json"),
    )
