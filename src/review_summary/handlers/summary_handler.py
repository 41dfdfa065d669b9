"""HTTP handlers for public review and summary operations.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes and error translation.
"""

from review_summary.dto import ReviewResponse, ReviewSummaryResponse, SubmitReviewRequest
from review_summary.entities import ReviewEntity
from review_summary.exceptions import ReviewSummaryError
from review_summary.services import ReviewAggregator, SummaryService

from .errors import to_http_exception


def review_to_dto(review: ReviewEntity) -> ReviewResponse:
    return ReviewResponse(
        id=review.id,
        therapist_id=review.therapist_id,
        rating=review.rating,
        review_text=review.review_text,
        reviewer_name=review.reviewer_name,
        is_approved=review.is_approved,
        created_at=review.created_at,
    )


class SummaryHandler:
    """HTTP handlers for the public surface.

    Example:
        ```python
        handler = SummaryHandler(summary_service=service, aggregator=aggregator)

        @app.get("/therapists/{therapist_id}/review-summary")
        async def review_summary(therapist_id: int):
            return await handler.get_review_summary(therapist_id)
        ```
    """

    def __init__(self, summary_service: SummaryService, aggregator: ReviewAggregator) -> None:
        self._summaries = summary_service
        self._aggregator = aggregator

    async def get_review_summary(self, therapist_id: int, force_refresh: bool = False) -> ReviewSummaryResponse:
        """Handle GET /therapists/{therapist_id}/review-summary requests.

        Raises:
            HTTPException: 503 if the store is down, 502 if generation fails
        """
        try:
            result = await self._summaries.get_review_summary(therapist_id, force_refresh=force_refresh)
        except ReviewSummaryError as e:
            raise to_http_exception(e, "Failed to get review summary") from e

        return ReviewSummaryResponse(
            summary=result.summary,
            review_count=result.review_count,
            cached=result.cached,
            cached_at=result.cached_at,
        )

    async def submit_review(self, therapist_id: int, request: SubmitReviewRequest) -> ReviewResponse:
        """Handle POST /therapists/{therapist_id}/reviews requests."""
        try:
            review = self._aggregator.submit(
                therapist_id=therapist_id,
                rating=request.rating,
                review_text=request.review_text,
                reviewer_name=request.reviewer_name,
            )
        except ReviewSummaryError as e:
            raise to_http_exception(e, "Failed to submit review") from e

        return review_to_dto(review)
