"""
VenueBookingClient against a mocked requests session.

No network: the session returns canned responses and records calls.
"""

import json
from unittest.mock import MagicMock

import pytest
import requests

from venue_booking_client import VenueBookingClient


def _response(status_code=200, payload=None, text=""):
    response = requests.Response()
    response.status_code = status_code
    if payload is not None:
        response._content = json.dumps(payload).encode("utf-8")
    else:
        response._content = text.encode("utf-8")
    response.url = "http://testserver/api"
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session):
    return VenueBookingClient(base_url="http://testserver/", session=session)


def test_list_facilities_calls_api_prefix(client, session):
    session.request.return_value = _response(payload=[{"type": "badminton", "count": 6, "name": "羽毛球场"}])
    data, error = client.list_facilities()

    assert error is None
    assert data[0]["type"] == "badminton"
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "GET"
    assert kwargs["url"] == "http://testserver/api/facilities"


def test_get_available_facilities_sends_query(client, session):
    session.request.return_value = _response(payload={"total": 6, "available": {"m1": 6}})
    data, error = client.get_available_facilities("2024-06-01", "badminton")

    assert error is None
    assert data["total"] == 6
    assert session.request.call_args.kwargs["params"] == {"date": "2024-06-01", "type": "badminton"}


def test_reserve_sends_camel_case_body(client, session):
    session.request.return_value = _response(payload={"success": True, "reservation": {"id": "abc"}})
    data, error = client.reserve(
        name="Li",
        phone="123",
        facility_type="badminton",
        date="2024-06-01",
        time_slot_id="m1",
        facility_number=1,
    )

    assert error is None
    assert data["reservation"]["id"] == "abc"
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "POST"
    assert kwargs["url"] == "http://testserver/api/reserve"
    assert kwargs["json"] == {
        "name": "Li",
        "phone": "123",
        "type": "badminton",
        "date": "2024-06-01",
        "timeSlotId": "m1",
        "facilityNumber": 1,
    }


def test_reserve_conflict_is_returned_as_error(client, session):
    session.request.return_value = _response(
        409, payload={"error": "该场地已被预约", "code": "ALREADY_RESERVED"}
    )
    data, error = client.reserve(
        name="Li",
        phone="123",
        facility_type="badminton",
        date="2024-06-01",
        time_slot_id="m1",
        facility_number=1,
    )

    assert data is None
    assert error == {"status_code": 409, "message": "该场地已被预约", "code": "ALREADY_RESERVED"}


def test_validation_error_uses_detail(client, session):
    session.request.return_value = _response(422, payload={"detail": "bad body"})
    _, error = client.list_time_slots()
    assert error["status_code"] == 422
    assert error["message"] == "bad body"
    assert error["code"] is None


def test_non_json_error_body_uses_text(client, session):
    session.request.return_value = _response(500, text="Internal Server Error")
    _, error = client.list_available_dates()
    assert error["status_code"] == 500
    assert error["message"] == "Internal Server Error"


def test_connection_error(client, session):
    session.request.side_effect = requests.ConnectionError("refused")
    data, error = client.list_reservations("123")
    assert data is None
    assert error == {"status_code": None, "message": "refused", "code": None}


def test_cancel_reservation_success(client, session):
    session.request.return_value = _response(payload={"success": True})
    ok, error = client.cancel_reservation("abc", "123")

    assert ok is True
    assert error is None
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "DELETE"
    assert kwargs["url"] == "http://testserver/api/reservations/abc"
    assert kwargs["params"] == {"phone": "123"}


def test_cancel_reservation_not_found(client, session):
    session.request.return_value = _response(404, payload={"error": "预约记录不存在", "code": "NOT_FOUND"})
    ok, error = client.cancel_reservation("abc", "123")
    assert ok is False
    assert error["code"] == "NOT_FOUND"
