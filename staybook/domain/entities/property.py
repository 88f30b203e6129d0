from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Host:
    name: str
    avatar: str = ""
    joined_date: str = ""


@dataclass(frozen=True)
class Property:
    id: str
    title: str
    description: str = ""
    price: float = 0.0
    location: str = ""
    images: list[str] = field(default_factory=list)
    amenities: list[str] = field(default_factory=list)
    rating: float = 0.0
    reviews: int = 0
    host: Host | None = None
    bedrooms: int = 0
    bathrooms: int = 0
    guests: int = 0
    rules: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Review:
    id: str
    user_id: str
    user_name: str
    rating: int
    comment: str
    created_at: str  # ISO timestamp
    user_avatar: str = ""
    helpful_count: int = 0
