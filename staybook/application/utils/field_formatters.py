from __future__ import annotations

import re

CARD_NUMBER_MAX_LENGTH = 19  # 16 digits + 3 separators
CVV_MAX_LENGTH = 4
DEFAULT_GUESTS = 1

_WHITESPACE = re.compile(r"\s")
_NON_DIGIT = re.compile(r"\D", re.ASCII)
_GROUP_OF_FOUR = re.compile(r"(.{4})")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)", re.ASCII)


def format_card_number(raw: str) -> str:
    """Group the card number in blocks of 4 separated by one space.

    Characters are grouped, not filtered: a stray non-digit keeps its place
    and is left for validation to reject.
    """
    compact = _WHITESPACE.sub("", raw)
    grouped = _GROUP_OF_FOUR.sub(r"\1 ", compact).strip()
    return grouped[:CARD_NUMBER_MAX_LENGTH].rstrip()


def format_cvv(raw: str) -> str:
    return _NON_DIGIT.sub("", raw)[:CVV_MAX_LENGTH]


def format_guests(raw: str) -> int:
    match = _LEADING_INT.match(raw)
    if not match:
        return DEFAULT_GUESTS
    guests = int(match.group(1))
    return guests if guests >= 1 else DEFAULT_GUESTS


def keep_as_is(raw: str) -> str:
    return raw
