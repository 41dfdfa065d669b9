"""Result entities returned by the summary services."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ReviewSummaryEntity:
    """Outcome of a review summary request.

    Attributes:
        summary: Generated or cached text; None when there are no reviews
        review_count: Number of reviews that went into the summary
        cached: True if the summary came from the cache
        cached_at: Creation time of the cache row on a hit
    """

    summary: str | None
    review_count: int
    cached: bool
    cached_at: datetime | None = None


@dataclass(frozen=True)
class PromptTestResultEntity:
    """Outcome of an ad hoc prompt test."""

    summary: str
    review_count: int
    input_preview: str
