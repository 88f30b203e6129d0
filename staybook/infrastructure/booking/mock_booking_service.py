from __future__ import annotations

import asyncio
import logging
from typing import Any

from staybook.application.ports.booking_service import BookingServicePort
from staybook.domain.entities.booking_result import BookingCreated, BookingRejected, BookingResult


class MockBookingService(BookingServicePort):
    def __init__(self, latency_seconds: float = 0.0) -> None:
        self._bookings: dict[str, dict[str, Any]] = {}
        self._latency_seconds = latency_seconds
        self._reject_message: str | None = None
        self.calls: list[dict[str, Any]] = []
        self._logger = logging.getLogger(__name__)

    def reject_next(self, message: str) -> None:
        """Make the next create_booking() call fail with the given message."""
        self._reject_message = message

    async def create_booking(self, payload: dict[str, Any]) -> BookingResult:
        self.calls.append(dict(payload))
        if self._latency_seconds:
            await asyncio.sleep(self._latency_seconds)

        if self._reject_message is not None:
            message, self._reject_message = self._reject_message, None
            self._logger.info("Mock booking rejected", extra={"reason": message})
            return BookingRejected(message=message, status_code=400)

        booking_id = f"bk_{len(self._bookings) + 1}"
        self._bookings[booking_id] = dict(payload)
        self._logger.info(
            "Mock booking created",
            extra={"booking_id": booking_id, "property_id": payload.get("propertyId")},
        )
        return BookingCreated(booking_id=booking_id)

    def get_booking(self, booking_id: str) -> dict[str, Any] | None:
        return self._bookings.get(booking_id)
