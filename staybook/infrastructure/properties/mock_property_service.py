from __future__ import annotations

import logging

from staybook.application.exceptions import PropertyNotFoundError
from staybook.application.ports.property_service import PropertyServicePort, ReviewServicePort
from staybook.domain.entities.property import Host, Property, Review


def _seed_properties() -> dict[str, Property]:
    return {
        "prop_1": Property(
            id="prop_1",
            title="Seaside Cottage",
            description="Two-bedroom cottage a short walk from the beach.",
            price=180.0,
            location="Cornwall, United Kingdom",
            images=["/images/cottage-1.jpg", "/images/cottage-2.jpg"],
            amenities=["WiFi", "Kitchen", "Free parking"],
            rating=4.7,
            reviews=4,
            host=Host(name="Maya", joined_date="2019-04-01"),
            bedrooms=2,
            bathrooms=1,
            guests=4,
            rules=["No smoking", "No parties"],
        ),
        "prop_2": Property(
            id="prop_2",
            title="City Loft",
            price=240.0,
            location="Lisbon, Portugal",
            rating=4.9,
            bedrooms=1,
            bathrooms=1,
            guests=2,
        ),
    }


def _seed_reviews() -> dict[str, list[Review]]:
    return {
        "prop_1": [
            Review(id="rv_1", user_id="u_1", user_name="Ana", rating=5, comment="Lovely stay.", created_at="2024-05-02T10:00:00Z", helpful_count=3),
            Review(id="rv_2", user_id="u_2", user_name="Ben", rating=4, comment="Great location.", created_at="2024-06-11T09:30:00Z"),
            Review(id="rv_3", user_id="u_3", user_name="Chloe", rating=5, comment="Would book again.", created_at="2024-07-20T18:15:00Z"),
            Review(id="rv_4", user_id="u_4", user_name="Dev", rating=4, comment="Cosy and clean.", created_at="2024-08-03T12:00:00Z"),
        ],
    }


class MockPropertyService(PropertyServicePort, ReviewServicePort):
    def __init__(
        self,
        properties: dict[str, Property] | None = None,
        reviews: dict[str, list[Review]] | None = None,
    ) -> None:
        self._properties = _seed_properties() if properties is None else dict(properties)
        self._reviews = _seed_reviews() if reviews is None else dict(reviews)
        self._logger = logging.getLogger(__name__)

    async def get_property(self, property_id: str) -> Property:
        prop = self._properties.get(property_id)
        if prop is None:
            raise PropertyNotFoundError(property_id)
        return prop

    async def list_reviews(self, property_id: str) -> list[Review]:
        reviews = list(self._reviews.get(property_id, []))
        self._logger.info("Mock reviews listed: %s", len(reviews), extra={"property_id": property_id})
        return reviews
