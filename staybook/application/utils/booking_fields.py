from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from staybook.application.exceptions import UnknownFieldError
from staybook.application.utils.field_formatters import (
    format_card_number,
    format_cvv,
    format_guests,
    keep_as_is,
)
from staybook.application.utils.field_validators import (
    check_card_number,
    check_check_in_date,
    check_check_out_date,
    check_cvv,
    check_email,
    check_expiration_date,
    required,
)
from staybook.domain.entities.booking_form import BookingField, FieldErrors, FormSnapshot

Formatter = Callable[[str], "str | int"]
Check = Callable[["str | int", FormSnapshot], "str | None"]


class FieldKind(str, Enum):
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    EMAIL = "email"
    PHONE = "phone"
    CARD_NUMBER = "card_number"
    EXPIRATION = "expiration"
    CVV = "cvv"
    ADDRESS = "address"
    CHECK_IN = "check_in"
    CHECK_OUT = "check_out"
    GUEST_COUNT = "guest_count"


@dataclass(frozen=True)
class FieldRule:
    format: Formatter
    check: Check | None = None


FIELD_KINDS: dict[BookingField, FieldKind] = {
    BookingField.FIRST_NAME: FieldKind.FIRST_NAME,
    BookingField.LAST_NAME: FieldKind.LAST_NAME,
    BookingField.EMAIL: FieldKind.EMAIL,
    BookingField.PHONE_NUMBER: FieldKind.PHONE,
    BookingField.CARD_NUMBER: FieldKind.CARD_NUMBER,
    BookingField.EXPIRATION_DATE: FieldKind.EXPIRATION,
    BookingField.CVV: FieldKind.CVV,
    BookingField.BILLING_ADDRESS: FieldKind.ADDRESS,
    BookingField.CHECK_IN_DATE: FieldKind.CHECK_IN,
    BookingField.CHECK_OUT_DATE: FieldKind.CHECK_OUT,
    BookingField.GUESTS: FieldKind.GUEST_COUNT,
}

FIELD_RULES: dict[FieldKind, FieldRule] = {
    FieldKind.FIRST_NAME: FieldRule(keep_as_is, required("First name is required")),
    FieldKind.LAST_NAME: FieldRule(keep_as_is, required("Last name is required")),
    FieldKind.EMAIL: FieldRule(keep_as_is, check_email),
    FieldKind.PHONE: FieldRule(keep_as_is, required("Phone number is required")),
    FieldKind.CARD_NUMBER: FieldRule(format_card_number, check_card_number),
    FieldKind.EXPIRATION: FieldRule(keep_as_is, check_expiration_date),
    FieldKind.CVV: FieldRule(format_cvv, check_cvv),
    FieldKind.ADDRESS: FieldRule(keep_as_is, required("Billing address is required")),
    FieldKind.CHECK_IN: FieldRule(keep_as_is, check_check_in_date),
    FieldKind.CHECK_OUT: FieldRule(keep_as_is, check_check_out_date),
    FieldKind.GUEST_COUNT: FieldRule(format_guests),
}


def _assert_exhaustive() -> None:
    missing_kinds = set(BookingField) - set(FIELD_KINDS)
    missing_rules = set(FieldKind) - set(FIELD_RULES)
    if missing_kinds or missing_rules:
        raise RuntimeError(
            f"Booking field table incomplete: fields={sorted(f.value for f in missing_kinds)} "
            f"kinds={sorted(k.value for k in missing_rules)}"
        )


_assert_exhaustive()


def resolve_field(name: str) -> BookingField:
    """Map a wire field name (camelCase) to a BookingField."""
    try:
        return BookingField(name)
    except ValueError:
        raise UnknownFieldError(f"Unknown booking field: {name}") from None


def rule_for(field: BookingField) -> FieldRule:
    return FIELD_RULES[FIELD_KINDS[field]]


def format_field(field: BookingField, raw: str) -> str | int:
    """Normalize one raw input event into the value stored on the snapshot."""
    return rule_for(field).format(raw)


def validate_form(snapshot: FormSnapshot) -> FieldErrors:
    """Run every field check against the snapshot. Empty result means submittable."""
    errors: FieldErrors = {}
    for field in BookingField:
        check = rule_for(field).check
        if check is None:
            continue
        message = check(snapshot.get(field), snapshot)
        if message:
            errors[field.value] = message
    return errors
