"""
Tests for the httpx booking and property service adapters.
"""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from staybook.application.exceptions import (
    BookingServiceContractError,
    PropertyNotFoundError,
    PropertyUpstreamError,
    ReviewsUpstreamError,
)
from staybook.application.use_cases.booking_form import SubmitOutcome
from staybook.domain.entities.booking_result import (
    SUBMIT_FAILED_MESSAGE,
    BookingCreated,
    BookingRejected,
)
from staybook.domain.entities.submission_state import SubmissionState
from staybook.infrastructure.booking.http_booking_service import HttpBookingService
from staybook.infrastructure.properties.http_property_service import HttpPropertyService

BASE_URL = "https://api.example.test"


def booking_service(handler) -> HttpBookingService:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpBookingService(base_url=BASE_URL, client=client)


def property_service(handler) -> HttpPropertyService:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpPropertyService(base_url=BASE_URL, client=client)


def test_booking_created():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(201, json={"id": "bk_1"})

    result = asyncio.run(booking_service(handler).create_booking({"propertyId": "prop_1", "guests": 2}))
    assert result == BookingCreated(booking_id="bk_1")
    assert result.ok is True
    assert seen["url"] == f"{BASE_URL}/bookings"
    assert seen["body"] == {"propertyId": "prop_1", "guests": 2}


def test_booking_error_message_from_service():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"message": "card declined"})

    result = asyncio.run(booking_service(handler).create_booking({}))
    assert result == BookingRejected(message="card declined", status_code=500)
    assert result.ok is False


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(400, json={"error": "bad"}),
        httpx.Response(502, text="<html>Bad gateway</html>"),
        httpx.Response(422, json={"message": "  "}),
    ],
)
def test_booking_error_without_message_uses_fallback(response):
    result = asyncio.run(booking_service(lambda request: response).create_booking({}))
    assert isinstance(result, BookingRejected)
    assert result.message == SUBMIT_FAILED_MESSAGE


def test_booking_transport_error_is_rejected():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    result = asyncio.run(booking_service(handler).create_booking({}))
    assert result == BookingRejected(message=SUBMIT_FAILED_MESSAGE)


def test_booking_success_without_id_breaks_contract():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"status": "ok"})

    with pytest.raises(BookingServiceContractError):
        asyncio.run(booking_service(handler).create_booking({}))


def test_booking_service_requires_base_url(monkeypatch):
    from staybook.core.config import settings

    monkeypatch.setattr(settings, "BOOKING_API_BASE_URL", None)
    with pytest.raises(ValueError):
        HttpBookingService()


def test_form_fails_with_server_message(make_form, fill_valid):
    """Scenario E end to end through the HTTP adapter."""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"message": "card declined"})

    form = fill_valid(make_form(booking_service=booking_service(handler)))
    outcome = asyncio.run(form.submit())
    assert outcome is SubmitOutcome.FAILED
    assert form.state == SubmissionState.failed("card declined")


def test_get_property():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/properties/prop_1"
        return httpx.Response(
            200,
            json={
                "id": "prop_1",
                "title": "Seaside Cottage",
                "price": 180,
                "images": ["/a.jpg"],
                "host": {"name": "Maya", "joinedDate": "2019-04-01"},
                "guests": 4,
            },
        )

    prop = asyncio.run(property_service(handler).get_property("prop_1"))
    assert prop.title == "Seaside Cottage"
    assert prop.price == 180.0
    assert prop.host.name == "Maya"
    assert prop.host.joined_date == "2019-04-01"
    assert prop.guests == 4


def test_get_property_not_found():
    service = property_service(lambda request: httpx.Response(404, json={"message": "nope"}))
    with pytest.raises(PropertyNotFoundError):
        asyncio.run(service.get_property("missing"))


@pytest.mark.parametrize(
    "response",
    [httpx.Response(500), httpx.Response(200, json={"title": "no id"})],
)
def test_get_property_upstream_failure(response):
    service = property_service(lambda request: response)
    with pytest.raises(PropertyUpstreamError):
        asyncio.run(service.get_property("prop_1"))


def test_list_reviews():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/properties/prop_1/reviews"
        return httpx.Response(
            200,
            json=[
                {"id": "rv_1", "userId": "u_1", "userName": "Ana", "rating": 5, "comment": "Lovely", "createdAt": "2024-05-02"},
            ],
        )

    reviews = asyncio.run(property_service(handler).list_reviews("prop_1"))
    assert len(reviews) == 1
    assert reviews[0].user_name == "Ana"
    assert reviews[0].helpful_count == 0


def test_list_reviews_empty_is_not_an_error():
    reviews = asyncio.run(property_service(lambda request: httpx.Response(200, json=[])).list_reviews("prop_1"))
    assert reviews == []


def test_list_reviews_failure():
    service = property_service(lambda request: httpx.Response(503))
    with pytest.raises(ReviewsUpstreamError):
        asyncio.run(service.list_reviews("prop_1"))
