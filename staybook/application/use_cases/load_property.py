from __future__ import annotations

import logging
from dataclasses import dataclass

from staybook.application.exceptions import PropertyNotFoundError, PropertyUpstreamError
from staybook.application.ports.property_service import PropertyServicePort
from staybook.domain.entities.property import Property

NOT_FOUND_MESSAGE = "Property not found"
LOAD_FAILED_MESSAGE = "Failed to load property details. Please try again later."


@dataclass(frozen=True)
class PropertyPage:
    status: str  # "ready", "not_found", "error"
    details: Property | None = None
    message: str | None = None

    @property
    def retryable(self) -> bool:
        return self.status == "error"


class LoadPropertyUseCase:
    def __init__(self, properties: PropertyServicePort) -> None:
        self._properties = properties
        self._logger = logging.getLogger(__name__)

    async def execute(self, property_id: str) -> PropertyPage:
        try:
            prop = await self._properties.get_property(property_id)
        except PropertyNotFoundError:
            self._logger.info("Property not found", extra={"property_id": property_id})
            return PropertyPage(status="not_found", message=NOT_FOUND_MESSAGE)
        except PropertyUpstreamError as e:
            self._logger.error(
                "Error fetching property details",
                extra={"property_id": property_id, "reason": str(e)},
            )
            return PropertyPage(status="error", message=LOAD_FAILED_MESSAGE)
        return PropertyPage(status="ready", details=prop)
