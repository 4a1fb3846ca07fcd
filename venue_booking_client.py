"""Venue booking API client.

This module defines a small client wrapper around the Venue Booking
REST API.  It is what a reservation UI (or a bot, or a script) uses to
talk to the mock backend.  The client uses the ``requests`` library
internally to make HTTP calls.

The client exposes one method per endpoint:

* :meth:`list_facilities` – facility types and their court counts.
* :meth:`list_time_slots` – the bookable time slots of a day.
* :meth:`list_available_dates` – the dates that can currently be booked.
* :meth:`get_available_facilities` – free courts per slot for a type and date.
* :meth:`reserve` – book a court.
* :meth:`list_reservations` – reservations made with a phone number.
* :meth:`cancel_reservation` – cancel a reservation.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``.  On failure ``data`` is ``None`` and ``error`` is a
dictionary with keys ``status_code``, ``message`` and ``code``;
``message`` is the user-facing text returned by the server.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class VenueBookingClient:
    """Client for interacting with the venue booking API."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
                The ``/api`` prefix is added by the client.
            timeout: Timeout in seconds for each request.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``DELETE``).
            path: Path below the ``/api`` prefix (e.g. ``/facilities``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}/api{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            code = None
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("error") or err_json.get("detail") or str(err_json)
                    code = err_json.get("code")
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message, "code": code}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc), "code": None}

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------
    def list_facilities(self) -> Tuple[Optional[List[Dict[str, Any]]], Optional[Error]]:
        return self._request("GET", "/facilities")

    def list_time_slots(self) -> Tuple[Optional[List[Dict[str, Any]]], Optional[Error]]:
        return self._request("GET", "/time-slots")

    def list_available_dates(self) -> Tuple[Optional[List[str]], Optional[Error]]:
        return self._request("GET", "/available-dates")

    def get_available_facilities(
        self, date: str, facility_type: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Return ``{"total": n, "available": {slot_id: free}}`` for a type and date."""
        return self._request(
            "GET", "/available-facilities", params={"date": date, "type": facility_type}
        )

    # ------------------------------------------------------------------
    # Reservations
    # ------------------------------------------------------------------
    def reserve(
        self,
        *,
        name: str,
        phone: str,
        facility_type: str,
        date: str,
        time_slot_id: str,
        facility_number: int,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Book a court.

        Returns:
            ``({"success": True, "reservation": {...}}, None)`` on success.
        """
        payload = {
            "name": name,
            "phone": phone,
            "type": facility_type,
            "date": date,
            "timeSlotId": time_slot_id,
            "facilityNumber": facility_number,
        }
        return self._request("POST", "/reserve", json_body=payload)

    def list_reservations(self, phone: str) -> Tuple[Optional[List[Dict[str, Any]]], Optional[Error]]:
        return self._request("GET", "/reservations", params={"phone": phone})

    def cancel_reservation(self, reservation_id: str, phone: str) -> Tuple[bool, Optional[Error]]:
        """Cancel a reservation.

        Returns:
            ``(True, None)`` if the server confirmed the cancellation,
            otherwise ``(False, error)``.
        """
        data, error = self._request(
            "DELETE", f"/reservations/{reservation_id}", params={"phone": phone}
        )
        if error:
            return False, error
        return bool(data and data.get("success")), None
