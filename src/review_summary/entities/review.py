"""Review domain entity."""

from dataclasses import dataclass
from datetime import datetime

MIN_RATING = 1
MAX_RATING = 5


@dataclass(frozen=True)
class ReviewEntity:
    """A single client review of a therapist.

    Attributes:
        id: Store-assigned review id
        therapist_id: The therapist this review belongs to
        rating: Star rating between 1 and 5
        review_text: Free-text body (may be empty)
        created_at: When the review was submitted (UTC)
        reviewer_name: Optional display name of the reviewer
        is_approved: Whether an administrator approved the review for display
    """

    id: int
    therapist_id: int
    rating: int
    review_text: str
    created_at: datetime
    reviewer_name: str | None = None
    is_approved: bool = False


@dataclass(frozen=True)
class RatingStatsEntity:
    """Aggregate rating over a therapist's approved reviews."""

    review_count: int
    average_rating: float
