from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from staybook.domain.entities.booking_result import BookingResult


class BookingServicePort(ABC):
    @abstractmethod
    async def create_booking(self, payload: dict[str, Any]) -> BookingResult:
        """Submit a booking payload. Returns BookingCreated or BookingRejected."""
        raise NotImplementedError
