from __future__ import annotations

from abc import ABC, abstractmethod

from staybook.domain.entities.property import Property, Review


class PropertyServicePort(ABC):
    @abstractmethod
    async def get_property(self, property_id: str) -> Property:
        """Fetch a property. Raises PropertyNotFoundError or PropertyUpstreamError."""
        raise NotImplementedError


class ReviewServicePort(ABC):
    @abstractmethod
    async def list_reviews(self, property_id: str) -> list[Review]:
        """List reviews for a property. An empty list is a valid result."""
        raise NotImplementedError
