from __future__ import annotations

import logging
from typing import Any

import httpx

from staybook.application.exceptions import BookingServiceContractError
from staybook.application.ports.booking_service import BookingServicePort
from staybook.core.config import settings
from staybook.domain.entities.booking_result import (
    SUBMIT_FAILED_MESSAGE,
    BookingCreated,
    BookingRejected,
    BookingResult,
)


class HttpBookingService(BookingServicePort):
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = (base_url or settings.BOOKING_API_BASE_URL or "").rstrip("/")
        self._timeout = timeout or settings.HTTP_TIMEOUT_SECONDS
        self._client = client
        self._logger = logging.getLogger(__name__)

        if not self._base_url:
            raise ValueError("BOOKING_API_BASE_URL is required for the HTTP booking service")

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def create_booking(self, payload: dict[str, Any]) -> BookingResult:
        url = f"{self._base_url}/bookings"
        property_id = payload.get("propertyId")
        try:
            resp = await self.client.post(url, json=payload)
        except httpx.RequestError as e:
            self._logger.error(
                "Booking request failed",
                extra={"property_id": property_id, "reason": str(e)},
            )
            return BookingRejected(message=SUBMIT_FAILED_MESSAGE)

        if resp.status_code >= 400:
            message = _error_message(resp)
            self._logger.error(
                "Booking service rejected booking",
                extra={"property_id": property_id, "status": resp.status_code, "reason": message},
            )
            return BookingRejected(message=message or SUBMIT_FAILED_MESSAGE, status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError as e:
            raise BookingServiceContractError("Booking service returned a non-JSON body") from e
        booking_id = data.get("id") if isinstance(data, dict) else None
        if booking_id in (None, ""):
            raise BookingServiceContractError("No booking id returned from booking service")

        self._logger.info(
            "Booking service accepted booking",
            extra={"property_id": property_id, "booking_id": booking_id},
        )
        return BookingCreated(booking_id=str(booking_id))

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None


def _error_message(resp: httpx.Response) -> str | None:
    try:
        data = resp.json()
    except ValueError:
        return None
    if isinstance(data, dict):
        message = data.get("message")
        if isinstance(message, str) and message.strip():
            return message
    return None
