from functools import lru_cache
import logging

from staybook.core.config import settings
from staybook.application.ports.booking_service import BookingServicePort
from staybook.application.ports.form_store import FormStorePort
from staybook.application.ports.property_service import PropertyServicePort, ReviewServicePort
from staybook.application.use_cases.booking_form import BookingForm
from staybook.application.use_cases.load_property import LoadPropertyUseCase
from staybook.application.use_cases.load_reviews import LoadReviewsUseCase
from staybook.infrastructure.booking.http_booking_service import HttpBookingService
from staybook.infrastructure.booking.mock_booking_service import MockBookingService
from staybook.infrastructure.properties.http_property_service import HttpPropertyService
from staybook.infrastructure.properties.mock_property_service import MockPropertyService
from staybook.infrastructure.store.memory_form_store import FormPageContext, MemoryFormStore


_form_store: MemoryFormStore | None = None


def _use_mocks(base_url: str | None) -> bool:
    return not base_url or settings.ENV.lower() in {"dev", "local"}


@lru_cache
def get_booking_service() -> BookingServicePort:
    logger = logging.getLogger(__name__)
    if _use_mocks(settings.BOOKING_API_BASE_URL):
        logger.info("Using MockBookingService (ENV=%s)", settings.ENV)
        return MockBookingService()
    logger.info("Using HttpBookingService")
    return HttpBookingService()


@lru_cache
def get_property_service() -> MockPropertyService | HttpPropertyService:
    if _use_mocks(settings.PROPERTY_API_BASE_URL):
        return MockPropertyService()
    return HttpPropertyService()


def get_properties() -> PropertyServicePort:
    return get_property_service()


def get_reviews() -> ReviewServicePort:
    return get_property_service()


def get_form_store() -> FormStorePort:
    global _form_store
    if _form_store is None:
        _form_store = MemoryFormStore()
    return _form_store


def mount_booking_form(property_id: str | None) -> BookingForm:
    form = BookingForm(
        booking_service=get_booking_service(),
        context=FormPageContext(property_id),
        confirmation_delay_seconds=settings.BOOKING_CONFIRMATION_DELAY_SECONDS,
        despace_card_number=settings.BOOKING_DESPACE_CARD_NUMBER,
    )
    get_form_store().add(form)
    return form


def get_load_property_use_case() -> LoadPropertyUseCase:
    return LoadPropertyUseCase(properties=get_properties())


def get_load_reviews_use_case() -> LoadReviewsUseCase:
    return LoadReviewsUseCase(reviews=get_reviews(), preview_count=settings.REVIEWS_PREVIEW_COUNT)


async def close_clients() -> None:
    for service in (get_booking_service(), get_property_service()):
        aclose = getattr(service, "aclose", None)
        if aclose is not None:
            await aclose()
