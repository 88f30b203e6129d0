"""
Per-field checks for the booking form.

Every check has the same shape: ``(value, snapshot) -> message | None``.
The snapshot is only consulted by cross-field checks.
"""

from __future__ import annotations

import re
from datetime import date

from staybook.domain.entities.booking_form import FormSnapshot

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
CARD_NUMBER_PATTERN = re.compile(r"\d{16}", re.ASCII)
EXPIRATION_PATTERN = re.compile(r"(0[1-9]|1[0-2])/\d{2}", re.ASCII)
CVV_PATTERN = re.compile(r"\d{3,4}", re.ASCII)


def required(message: str):
    def check(value: str | int, snapshot: FormSnapshot) -> str | None:
        if not str(value).strip():
            return message
        return None

    return check


def check_email(value: str, snapshot: FormSnapshot) -> str | None:
    if not value.strip():
        return "Email is required"
    if not EMAIL_PATTERN.search(value):
        return "Email is invalid"
    return None


def check_card_number(value: str, snapshot: FormSnapshot) -> str | None:
    if not value.strip():
        return "Card number is required"
    if not CARD_NUMBER_PATTERN.fullmatch(re.sub(r"\s", "", value)):
        return "Card number must be 16 digits"
    return None


def check_expiration_date(value: str, snapshot: FormSnapshot) -> str | None:
    if not value.strip():
        return "Expiration date is required"
    if not EXPIRATION_PATTERN.fullmatch(value):
        return "Expiration date must be in MM/YY format"
    return None


def check_cvv(value: str, snapshot: FormSnapshot) -> str | None:
    if not value.strip():
        return "CVV is required"
    if not CVV_PATTERN.fullmatch(value):
        return "CVV must be 3 or 4 digits"
    return None


def check_check_in_date(value: str, snapshot: FormSnapshot) -> str | None:
    if not value:
        return "Check-in date is required"
    return None


def check_check_out_date(value: str, snapshot: FormSnapshot) -> str | None:
    check_in = _parse_iso_date(snapshot.check_in_date)
    check_out = _parse_iso_date(value)
    # Both dates must parse before they can be compared.
    if check_in is not None and check_out is not None and check_in >= check_out:
        return "Check-out date must be after check-in date"
    if not value:
        return "Check-out date is required"
    return None


def _parse_iso_date(value: str) -> date | None:
    if not value:
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        return None
