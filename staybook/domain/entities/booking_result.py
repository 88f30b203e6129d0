from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

SUBMIT_FAILED_MESSAGE = "Failed to submit booking. Please try again."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again."


@dataclass(frozen=True)
class BookingCreated:
    booking_id: str
    ok: Literal[True] = True


@dataclass(frozen=True)
class BookingRejected:
    message: str
    status_code: int | None = None
    ok: Literal[False] = False


BookingResult = Union[BookingCreated, BookingRejected]
