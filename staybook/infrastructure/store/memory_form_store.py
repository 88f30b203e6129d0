from __future__ import annotations

import logging
from typing import Callable

from staybook.application.exceptions import FormNotFoundError
from staybook.application.ports.form_store import FormRedirect, FormStorePort
from staybook.application.ports.page_context import PageContextPort
from staybook.application.use_cases.booking_form import BookingForm


class FormPageContext(PageContextPort):
    """Page context of a form mounted through the API; records the redirect for the client."""

    def __init__(self, property_id: str | None, on_navigate: Callable[[str], None] | None = None) -> None:
        self._property_id = property_id
        self.on_navigate = on_navigate
        self.redirect_to: str | None = None

    def navigate(self, path: str) -> None:
        self.redirect_to = path
        if self.on_navigate is not None:
            self.on_navigate(path)

    def current_property_id(self) -> str | None:
        return self._property_id


class MemoryFormStore(FormStorePort):
    """
    Mounted forms by id.

    A form that navigates to its confirmation page is unmounted right away;
    only its redirect is kept until the client reads it once.
    """

    def __init__(self) -> None:
        self._forms: dict[str, BookingForm] = {}
        self._redirects: dict[str, FormRedirect] = {}
        self._logger = logging.getLogger(__name__)

    def add(self, form: BookingForm) -> None:
        self._forms[form.form_id] = form
        if isinstance(form.context, FormPageContext):
            form.context.on_navigate = lambda path: self._navigated_away(form.form_id, path)
        self._logger.info("Booking form mounted", extra={"form_id": form.form_id})

    def get(self, form_id: str) -> BookingForm:
        form = self._forms.get(form_id)
        if form is None:
            raise FormNotFoundError(form_id)
        return form

    def remove(self, form_id: str) -> BookingForm:
        form = self._forms.pop(form_id, None)
        if form is None:
            raise FormNotFoundError(form_id)
        form.close()
        self._redirects.pop(form_id, None)
        self._logger.info("Booking form unmounted", extra={"form_id": form_id})
        return form

    def take_redirect(self, form_id: str) -> FormRedirect | None:
        return self._redirects.pop(form_id, None)

    def _navigated_away(self, form_id: str, path: str) -> None:
        form = self._forms.pop(form_id, None)
        if form is None:
            return
        form.close()
        self._redirects[form_id] = FormRedirect(
            form_id=form_id,
            property_id=form.snapshot.property_id or form.context.current_property_id(),
            booking_id=form.state.booking_id,
            path=path,
        )
        self._logger.info(
            "Booking form navigated away",
            extra={"form_id": form_id, "booking_id": form.state.booking_id},
        )

    def __len__(self) -> int:
        return len(self._forms)
