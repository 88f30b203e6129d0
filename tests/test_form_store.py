"""
Tests for the in-memory store of mounted booking forms.
"""

from __future__ import annotations

import asyncio

import pytest

from staybook.application.exceptions import FormNotFoundError
from staybook.application.use_cases.booking_form import BookingForm
from staybook.infrastructure.booking.mock_booking_service import MockBookingService
from staybook.infrastructure.store.memory_form_store import FormPageContext, MemoryFormStore


@pytest.fixture
def store():
    return MemoryFormStore()


@pytest.fixture
def mount(store):
    def _mount(property_id="prop_1", delay=0.01, service=None):
        form = BookingForm(
            booking_service=service or MockBookingService(),
            context=FormPageContext(property_id),
            confirmation_delay_seconds=delay,
        )
        store.add(form)
        return form
    return _mount


def test_form_is_discarded_once_it_navigates_away(store, mount, fill_valid):
    """A succeeded form leaves the store when the confirmation redirect fires."""
    form = fill_valid(mount())

    async def scenario():
        await form.submit()
        assert len(store) == 1
        await asyncio.sleep(0.05)

    asyncio.run(scenario())
    assert len(store) == 0
    assert form.closed
    with pytest.raises(FormNotFoundError):
        store.get(form.form_id)

    redirect = store.take_redirect(form.form_id)
    assert redirect.path == "/booking/confirmation?bookingId=bk_1"
    assert redirect.booking_id == "bk_1"
    assert redirect.property_id == "prop_1"
    assert store.take_redirect(form.form_id) is None


def test_failed_form_stays_mounted(store, mount, fill_valid):
    service = MockBookingService()
    service.reject_next("card declined")
    form = fill_valid(mount(service=service))
    asyncio.run(form.submit())
    assert store.get(form.form_id) is form
    assert store.take_redirect(form.form_id) is None


def test_remove_before_redirect_cancels_it(store, mount, fill_valid):
    form = fill_valid(mount())

    async def scenario():
        await form.submit()
        store.remove(form.form_id)
        await asyncio.sleep(0.05)

    asyncio.run(scenario())
    assert form.context.redirect_to is None
    assert store.take_redirect(form.form_id) is None
    with pytest.raises(FormNotFoundError):
        store.remove(form.form_id)
