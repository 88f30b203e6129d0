from pydantic import BaseModel, Field
from typing import Any

from staybook.application.ports.form_store import FormRedirect
from staybook.application.use_cases.booking_form import BookingForm
from staybook.domain.entities.submission_state import SubmissionStatus
from staybook.infrastructure.store.memory_form_store import FormPageContext


class CreateBookingFormSchema(BaseModel):
    property_id: str | None = None


class FieldUpdateSchema(BaseModel):
    value: str | int


class BookingFormSchema(BaseModel):
    form_id: str
    property_id: str | None = None
    values: dict[str, Any] = Field(default_factory=dict)
    errors: dict[str, str] = Field(default_factory=dict)
    status: str
    booking_id: str | None = None
    message: str | None = None
    navigation_scheduled: bool = False
    redirect_to: str | None = None

    @classmethod
    def from_form(cls, form: BookingForm) -> "BookingFormSchema":
        snapshot = form.snapshot
        payload = snapshot.to_payload()
        state = form.state
        context = form.context
        return cls(
            form_id=form.form_id,
            property_id=payload.pop("propertyId"),
            values=payload,
            errors=form.errors,
            status=state.status.value,
            booking_id=state.booking_id,
            message=state.message,
            navigation_scheduled=form.navigation_scheduled,
            redirect_to=context.redirect_to if isinstance(context, FormPageContext) else None,
        )

    @classmethod
    def from_redirect(cls, redirect: FormRedirect) -> "BookingFormSchema":
        return cls(
            form_id=redirect.form_id,
            property_id=redirect.property_id,
            status=SubmissionStatus.SUCCEEDED.value,
            booking_id=redirect.booking_id,
            redirect_to=redirect.path,
        )


class SubmitResponseSchema(BaseModel):
    outcome: str
    form: BookingFormSchema


class HostSchema(BaseModel):
    name: str
    avatar: str = ""
    joined_date: str = ""


class PropertySchema(BaseModel):
    id: str
    title: str
    description: str = ""
    price: float = 0.0
    location: str = ""
    images: list[str] = Field(default_factory=list)
    amenities: list[str] = Field(default_factory=list)
    rating: float = 0.0
    reviews: int = 0
    host: HostSchema | None = None
    bedrooms: int = 0
    bathrooms: int = 0
    guests: int = 0
    rules: list[str] = Field(default_factory=list)


class ReviewSchema(BaseModel):
    id: str
    user_id: str
    user_name: str
    rating: int
    comment: str
    created_at: str
    user_avatar: str = ""
    helpful_count: int = 0


class ReviewsPanelSchema(BaseModel):
    status: str
    reviews: list[ReviewSchema] = Field(default_factory=list)
    total: int = 0
    average_rating: float | None = None
    count_label: str = ""
    has_more: bool = False
    message: str | None = None
