"""Review aggregation: fetching, rendering and moderating therapist reviews."""

import logging

from review_summary.config import settings
from review_summary.entities import MAX_RATING, MIN_RATING, RatingStatsEntity, ReviewEntity
from review_summary.exceptions import InvalidReviewError, ReviewNotFoundError
from review_summary.protocols import ReviewStore

logger = logging.getLogger(__name__)


class ReviewAggregator:
    """Loads a therapist's reviews and renders them into one text block.

    Example:
        ```python
        aggregator = ReviewAggregator(store=RedisReviewRepository(client))
        reviews = aggregator.fetch(42)
        text = aggregator.render(reviews)
        ```
    """

    def __init__(self, store: ReviewStore, approved_only: bool | None = None) -> None:
        """Initialize the aggregator.

        Args:
            store: Review storage backend (required).
            approved_only: Only summarize approved reviews. Defaults to settings.
        """
        self._store = store
        self._approved_only = settings.summary_approved_only if approved_only is None else approved_only

    @property
    def approved_only(self) -> bool:
        return self._approved_only

    def fetch(self, therapist_id: int) -> list[ReviewEntity]:
        """Return the therapist's reviews newest first; empty if there are none."""
        return self._store.list_for_therapist(therapist_id, approved_only=self._approved_only)

    @staticmethod
    def render(reviews: list[ReviewEntity]) -> str:
        """Render reviews as numbered blocks separated by blank lines.

        Each block reads ``Review {n} ({rating}/5 stars):\\n{text}\\n\\n``,
        numbered from 1 in the given order.
        """
        return "".join(
            f"Review {idx} ({review.rating}/{MAX_RATING} stars):\n{review.review_text}\n\n"
            for idx, review in enumerate(reviews, start=1)
        )

    def submit(
        self,
        therapist_id: int,
        rating: int,
        review_text: str,
        reviewer_name: str | None = None,
    ) -> ReviewEntity:
        """Record a public review submission; it stays hidden until approved.

        Raises:
            InvalidReviewError: If the rating is outside 1..5
        """
        if not MIN_RATING <= rating <= MAX_RATING:
            raise InvalidReviewError(f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {rating}")

        review = self._store.add(
            therapist_id=therapist_id,
            rating=rating,
            review_text=review_text,
            reviewer_name=reviewer_name,
        )
        logger.info("Review %s submitted for therapist %s", review.id, therapist_id)
        return review

    def set_approval(self, review_id: int, is_approved: bool) -> ReviewEntity:
        """Approve or reject a review.

        Raises:
            ReviewNotFoundError: If the review does not exist
        """
        review = self._store.set_approval(review_id, is_approved)
        if review is None:
            raise ReviewNotFoundError(review_id)

        logger.info("Review %s %s", review_id, "approved" if is_approved else "rejected")
        return review

    def rating_stats(self, therapist_id: int) -> RatingStatsEntity:
        """Count and average rating over approved reviews only."""
        approved = self._store.list_for_therapist(therapist_id, approved_only=True)
        if not approved:
            return RatingStatsEntity(review_count=0, average_rating=0.0)

        average = sum(r.rating for r in approved) / len(approved)
        return RatingStatsEntity(review_count=len(approved), average_rating=round(average, 1))
