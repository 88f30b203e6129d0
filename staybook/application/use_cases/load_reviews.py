from __future__ import annotations

import logging
from dataclasses import dataclass, field

from staybook.application.exceptions import ReviewsUpstreamError
from staybook.application.ports.property_service import ReviewServicePort
from staybook.domain.entities.property import Review

LOAD_FAILED_MESSAGE = "Failed to load reviews. Please try again later."


@dataclass(frozen=True)
class ReviewsPanel:
    status: str  # "ready", "empty", "error"
    reviews: list[Review] = field(default_factory=list)  # what is shown
    total: int = 0
    average_rating: float | None = None
    count_label: str = ""
    has_more: bool = False
    message: str | None = None


def summarize_reviews(reviews: list[Review], preview_count: int, show_all: bool = False) -> ReviewsPanel:
    if not reviews:
        return ReviewsPanel(status="empty")

    total = len(reviews)
    average = sum(r.rating for r in reviews) / total
    label = f"{total} review" if total == 1 else f"{total} reviews"
    shown = list(reviews) if show_all else list(reviews[:preview_count])
    return ReviewsPanel(
        status="ready",
        reviews=shown,
        total=total,
        average_rating=round(average, 1),
        count_label=label,
        has_more=total > preview_count,
    )


class LoadReviewsUseCase:
    def __init__(self, reviews: ReviewServicePort, preview_count: int = 3) -> None:
        self._reviews = reviews
        self._preview_count = preview_count
        self._logger = logging.getLogger(__name__)

    async def execute(self, property_id: str, show_all: bool = False) -> ReviewsPanel:
        try:
            reviews = await self._reviews.list_reviews(property_id)
        except ReviewsUpstreamError as e:
            self._logger.error(
                "Error fetching reviews",
                extra={"property_id": property_id, "reason": str(e)},
            )
            return ReviewsPanel(status="error", message=LOAD_FAILED_MESSAGE)
        return summarize_reviews(reviews, self._preview_count, show_all=show_all)
