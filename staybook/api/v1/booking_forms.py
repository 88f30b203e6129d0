from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from staybook.api.v1.schemas import (
    BookingFormSchema,
    CreateBookingFormSchema,
    FieldUpdateSchema,
    SubmitResponseSchema,
)
from staybook.application.exceptions import FormNotFoundError, UnknownFieldError
from staybook.application.ports.form_store import FormStorePort
from staybook.application.use_cases.booking_form import BookingForm, SubmitOutcome
from staybook.application.utils.booking_fields import resolve_field
from staybook.wiring.dependencies import get_form_store, mount_booking_form

router = APIRouter()
logger = logging.getLogger(__name__)


def _get_form(form_id: str, store: FormStorePort) -> BookingForm:
    try:
        return store.get(form_id)
    except FormNotFoundError:
        raise HTTPException(status_code=404, detail="Booking form not found")


@router.post("/booking-forms", response_model=BookingFormSchema, status_code=201)
async def create_booking_form(req: CreateBookingFormSchema):
    form = mount_booking_form(req.property_id)
    return BookingFormSchema.from_form(form)


@router.get("/booking-forms/{form_id}", response_model=BookingFormSchema)
async def get_booking_form(form_id: str, store: FormStorePort = Depends(get_form_store)):
    try:
        return BookingFormSchema.from_form(store.get(form_id))
    except FormNotFoundError:
        pass
    # a form that already redirected answers once with where it went
    redirect = store.take_redirect(form_id)
    if redirect is None:
        raise HTTPException(status_code=404, detail="Booking form not found")
    return BookingFormSchema.from_redirect(redirect)


@router.patch("/booking-forms/{form_id}/fields/{field_name}", response_model=BookingFormSchema)
async def update_field(
    form_id: str,
    field_name: str,
    req: FieldUpdateSchema,
    store: FormStorePort = Depends(get_form_store),
):
    form = _get_form(form_id, store)
    try:
        field = resolve_field(field_name)
    except UnknownFieldError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if form.state.is_submitting:
        raise HTTPException(status_code=409, detail="Booking is being submitted")

    form.update_field(field, str(req.value))
    return BookingFormSchema.from_form(form)


@router.post("/booking-forms/{form_id}/submit", response_model=SubmitResponseSchema)
async def submit_booking_form(form_id: str, store: FormStorePort = Depends(get_form_store)):
    form = _get_form(form_id, store)
    outcome = await form.submit()
    view = BookingFormSchema.from_form(form)
    if outcome is SubmitOutcome.INVALID:
        raise HTTPException(
            status_code=422,
            detail={"outcome": outcome.value, "errors": view.errors},
        )
    return SubmitResponseSchema(outcome=outcome.value, form=view)


@router.delete("/booking-forms/{form_id}", status_code=204)
async def delete_booking_form(form_id: str, store: FormStorePort = Depends(get_form_store)):
    try:
        store.remove(form_id)
    except FormNotFoundError:
        raise HTTPException(status_code=404, detail="Booking form not found")
