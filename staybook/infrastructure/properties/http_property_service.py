from __future__ import annotations

import logging
from typing import Any

import httpx

from staybook.application.exceptions import (
    PropertyNotFoundError,
    PropertyUpstreamError,
    ReviewsUpstreamError,
)
from staybook.application.ports.property_service import PropertyServicePort, ReviewServicePort
from staybook.core.config import settings
from staybook.domain.entities.property import Host, Property, Review


class HttpPropertyService(PropertyServicePort, ReviewServicePort):
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = (base_url or settings.PROPERTY_API_BASE_URL or "").rstrip("/")
        self._timeout = timeout or settings.HTTP_TIMEOUT_SECONDS
        self._client = client
        self._logger = logging.getLogger(__name__)

        if not self._base_url:
            raise ValueError("PROPERTY_API_BASE_URL is required for the HTTP property service")

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def get_property(self, property_id: str) -> Property:
        url = f"{self._base_url}/properties/{property_id}"
        try:
            resp = await self.client.get(url)
        except httpx.RequestError as e:
            raise PropertyUpstreamError(str(e)) from e

        if resp.status_code == 404:
            raise PropertyNotFoundError(property_id)
        if resp.status_code >= 400:
            raise PropertyUpstreamError(f"Property service returned {resp.status_code}")

        try:
            return parse_property(resp.json())
        except (ValueError, KeyError, TypeError) as e:
            raise PropertyUpstreamError("Malformed property payload") from e

    async def list_reviews(self, property_id: str) -> list[Review]:
        url = f"{self._base_url}/properties/{property_id}/reviews"
        try:
            resp = await self.client.get(url)
            resp.raise_for_status()
            data = resp.json()
            return [parse_review(item) for item in data]
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            raise ReviewsUpstreamError(str(e)) from e

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None


def parse_property(data: dict[str, Any]) -> Property:
    host = data.get("host")
    return Property(
        id=str(data["id"]),
        title=data["title"],
        description=data.get("description", ""),
        price=float(data.get("price", 0)),
        location=data.get("location", ""),
        images=list(data.get("images") or []),
        amenities=list(data.get("amenities") or []),
        rating=float(data.get("rating", 0)),
        reviews=int(data.get("reviews", 0)),
        host=(
            Host(
                name=host["name"],
                avatar=host.get("avatar", ""),
                joined_date=host.get("joinedDate", ""),
            )
            if host
            else None
        ),
        bedrooms=int(data.get("bedrooms", 0)),
        bathrooms=int(data.get("bathrooms", 0)),
        guests=int(data.get("guests", 0)),
        rules=list(data.get("rules") or []),
    )


def parse_review(data: dict[str, Any]) -> Review:
    return Review(
        id=str(data["id"]),
        user_id=str(data.get("userId", "")),
        user_name=data.get("userName", ""),
        rating=int(data["rating"]),
        comment=data.get("comment", ""),
        created_at=data.get("createdAt", ""),
        user_avatar=data.get("userAvatar", ""),
        helpful_count=int(data.get("helpfulCount", 0)),
    )
