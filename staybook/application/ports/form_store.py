from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from staybook.application.use_cases.booking_form import BookingForm


@dataclass(frozen=True)
class FormRedirect:
    """What is left of a form after it navigated to the confirmation page."""
    form_id: str
    property_id: str | None
    booking_id: str | None
    path: str


class FormStorePort(ABC):
    @abstractmethod
    def add(self, form: BookingForm) -> None:
        raise NotImplementedError

    @abstractmethod
    def get(self, form_id: str) -> BookingForm:
        """Return a mounted form. Raises FormNotFoundError."""
        raise NotImplementedError

    @abstractmethod
    def remove(self, form_id: str) -> BookingForm:
        """Unmount a form and close it. Raises FormNotFoundError."""
        raise NotImplementedError

    @abstractmethod
    def take_redirect(self, form_id: str) -> FormRedirect | None:
        """Return and forget the redirect of a form that navigated away."""
        raise NotImplementedError
