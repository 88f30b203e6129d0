from __future__ import annotations

import asyncio
import logging
import uuid
from enum import Enum
from typing import Callable
from urllib.parse import urlencode

from staybook.application.ports.booking_service import BookingServicePort
from staybook.application.ports.page_context import PageContextPort
from staybook.application.utils.booking_fields import format_field, validate_form
from staybook.domain.entities.booking_form import BookingField, FieldErrors, FormSnapshot
from staybook.domain.entities.booking_result import (
    SUBMIT_FAILED_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
    BookingRejected,
    BookingResult,
)
from staybook.domain.entities.submission_state import SubmissionState

CONFIRMATION_PATH = "/booking/confirmation"

StateListener = Callable[[SubmissionState], None]


class SubmitOutcome(str, Enum):
    IGNORED = "ignored"
    INVALID = "invalid"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class BookingForm:
    """
    One booking form instance, from mount to teardown.

    Owns the snapshot, the field errors and the submission state. Input events
    go through update_field(); submit() validates, sends at most one request at
    a time and, on success, schedules the confirmation redirect.
    """

    def __init__(
        self,
        booking_service: BookingServicePort,
        context: PageContextPort,
        confirmation_delay_seconds: float = 2.0,
        despace_card_number: bool = False,
        form_id: str | None = None,
    ) -> None:
        self.form_id = form_id or uuid.uuid4().hex
        self._booking_service = booking_service
        self._context = context
        self._confirmation_delay_seconds = confirmation_delay_seconds
        self._despace_card_number = despace_card_number
        self._snapshot = FormSnapshot(property_id=context.current_property_id())
        self._errors: FieldErrors = {}
        self._state = SubmissionState.idle()
        self._listeners: list[StateListener] = []
        self._navigation: asyncio.TimerHandle | None = None
        self._closed = False
        self._logger = logging.getLogger(__name__)

    @property
    def snapshot(self) -> FormSnapshot:
        return self._snapshot

    @property
    def errors(self) -> FieldErrors:
        return dict(self._errors)

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def context(self) -> PageContextPort:
        return self._context

    @property
    def navigation_scheduled(self) -> bool:
        return self._navigation is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a state listener. Returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def update_field(self, field: BookingField, raw: str) -> str | int:
        value = format_field(field, raw)
        self._snapshot = self._snapshot.with_value(field, value)
        # Errors only come back on the next submit attempt.
        self._errors.pop(field.value, None)
        self._logger.debug("Field updated", extra={"form_id": self.form_id, "field": field.value})
        return value

    async def submit(self) -> SubmitOutcome:
        if self._closed or not self._state.accepts_submit:
            self._logger.info(
                "Submit ignored",
                extra={"form_id": self.form_id, "status": self._state.status.value},
            )
            return SubmitOutcome.IGNORED

        errors = validate_form(self._snapshot)
        self._errors = errors
        if errors:
            self._logger.info(
                "Booking form invalid",
                extra={"form_id": self.form_id, "reason": ",".join(sorted(errors))},
            )
            return SubmitOutcome.INVALID

        property_id = self._snapshot.property_id or self._context.current_property_id()
        payload = self._snapshot.to_payload(
            property_id=property_id,
            despace_card_number=self._despace_card_number,
        )
        self._transition(SubmissionState.submitting())

        try:
            result: BookingResult = await self._booking_service.create_booking(payload)
        except asyncio.CancelledError:
            self._transition(SubmissionState.failed(SUBMIT_FAILED_MESSAGE))
            raise
        except Exception as e:
            self._logger.exception(
                "Booking service call failed",
                extra={"form_id": self.form_id, "property_id": property_id, "reason": str(e)},
            )
            result = BookingRejected(message=UNEXPECTED_ERROR_MESSAGE)

        if result.ok:
            self._transition(SubmissionState.succeeded(result.booking_id))
            self._logger.info(
                "Booking created",
                extra={"form_id": self.form_id, "property_id": property_id, "booking_id": result.booking_id},
            )
            self._schedule_confirmation(result.booking_id)
            return SubmitOutcome.SUCCEEDED

        message = result.message or SUBMIT_FAILED_MESSAGE
        self._transition(SubmissionState.failed(message))
        self._logger.warning(
            "Booking rejected",
            extra={"form_id": self.form_id, "property_id": property_id, "reason": message},
        )
        return SubmitOutcome.FAILED

    def close(self) -> None:
        """Tear the form down. Cancels a pending confirmation redirect."""
        if self._navigation is not None:
            self._navigation.cancel()
            self._navigation = None
        self._listeners.clear()
        self._closed = True

    def _schedule_confirmation(self, booking_id: str) -> None:
        if self._closed:
            return
        loop = asyncio.get_running_loop()
        self._navigation = loop.call_later(
            self._confirmation_delay_seconds,
            self._navigate_to_confirmation,
            booking_id,
        )

    def _navigate_to_confirmation(self, booking_id: str) -> None:
        self._navigation = None
        if self._closed:
            return
        path = f"{CONFIRMATION_PATH}?{urlencode({'bookingId': booking_id})}"
        self._context.navigate(path)

    def _transition(self, state: SubmissionState) -> None:
        if state == self._state:
            return
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                self._logger.exception(
                    "Submission state listener failed",
                    extra={"form_id": self.form_id, "status": state.status.value},
                )
