from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any


class BookingField(str, Enum):
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    EMAIL = "email"
    PHONE_NUMBER = "phoneNumber"
    CARD_NUMBER = "cardNumber"
    EXPIRATION_DATE = "expirationDate"
    CVV = "cvv"
    BILLING_ADDRESS = "billingAddress"
    CHECK_IN_DATE = "checkInDate"
    CHECK_OUT_DATE = "checkOutDate"
    GUESTS = "guests"

    @property
    def attr(self) -> str:
        return self.name.lower()


# field name -> human readable message; a missing key means the field is valid
FieldErrors = dict[str, str]


@dataclass(frozen=True)
class FormSnapshot:
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone_number: str = ""
    card_number: str = ""  # display form, grouped in 4s
    expiration_date: str = ""  # MM/YY
    cvv: str = ""
    billing_address: str = ""
    check_in_date: str = ""  # YYYY-MM-DD
    check_out_date: str = ""  # YYYY-MM-DD
    guests: int = 1
    property_id: str | None = None  # set once at mount

    def get(self, field: BookingField) -> str | int:
        return getattr(self, field.attr)

    def with_value(self, field: BookingField, value: str | int) -> FormSnapshot:
        return replace(self, **{field.attr: value})

    def to_payload(self, property_id: str | None = None, despace_card_number: bool = False) -> dict[str, Any]:
        """Wire shape expected by the booking service (camelCase keys)."""
        payload: dict[str, Any] = {field.value: self.get(field) for field in BookingField}
        if despace_card_number:
            payload[BookingField.CARD_NUMBER.value] = "".join(self.card_number.split())
        payload["propertyId"] = property_id or self.property_id
        return payload
