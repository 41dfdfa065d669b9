"""Exception hierarchy for the review summary service."""


class ReviewSummaryError(Exception):
    """Base exception for all review summary errors."""


class StoreUnavailableError(ReviewSummaryError):
    """Raised when the backing store cannot be reached."""


class NoReviewsError(ReviewSummaryError):
    """Raised when an operation needs at least one review and the therapist has none."""

    def __init__(self, therapist_id: int) -> None:
        super().__init__(f"No reviews found for therapist {therapist_id}")
        self.therapist_id = therapist_id


class ReviewNotFoundError(ReviewSummaryError):
    """Raised when a review id does not exist."""

    def __init__(self, review_id: int) -> None:
        super().__init__(f"Review {review_id} not found")
        self.review_id = review_id


class InvalidReviewError(ReviewSummaryError):
    """Raised when a submitted review fails validation."""


class UnauthorizedError(ReviewSummaryError):
    """Raised when a non-admin caller invokes an admin-only operation."""


class GenerationError(ReviewSummaryError):
    """Raised when the text-generation provider fails or returns an unusable payload."""
