"""Pytest configuration and fixtures for booking form tests."""

from __future__ import annotations

import pytest

from staybook.application.ports.page_context import PageContextPort
from staybook.application.use_cases.booking_form import BookingForm
from staybook.domain.entities.booking_form import BookingField
from staybook.infrastructure.booking.mock_booking_service import MockBookingService


class RecordingContext(PageContextPort):
    def __init__(self, property_id: str | None = "prop_1") -> None:
        self.property_id = property_id
        self.paths: list[str] = []

    def navigate(self, path: str) -> None:
        self.paths.append(path)

    def current_property_id(self) -> str | None:
        return self.property_id


VALID_INPUT = {
    BookingField.FIRST_NAME: "Jane",
    BookingField.LAST_NAME: "Doe",
    BookingField.EMAIL: "jane@example.com",
    BookingField.PHONE_NUMBER: "+44 20 7946 0958",
    BookingField.CARD_NUMBER: "1234567890123456",
    BookingField.EXPIRATION_DATE: "08/27",
    BookingField.CVV: "123",
    BookingField.BILLING_ADDRESS: "1 Harbour Street, St Ives",
    BookingField.CHECK_IN_DATE: "2025-06-10",
    BookingField.CHECK_OUT_DATE: "2025-06-14",
    BookingField.GUESTS: "2",
}


@pytest.fixture
def context():
    return RecordingContext()


@pytest.fixture
def booking_service():
    return MockBookingService()


@pytest.fixture
def make_form(context, booking_service):
    """Factory fixture building a form with the shared context and mock service."""
    def _make(**kwargs):
        kwargs.setdefault("booking_service", booking_service)
        kwargs.setdefault("context", context)
        kwargs.setdefault("confirmation_delay_seconds", 0.01)
        return BookingForm(**kwargs)
    return _make


@pytest.fixture
def fill_valid():
    """Type a complete, valid booking into a form."""
    def _fill(form: BookingForm, **overrides: str) -> BookingForm:
        for field, raw in VALID_INPUT.items():
            form.update_field(field, overrides.get(field.attr, raw))
        return form
    return _fill
