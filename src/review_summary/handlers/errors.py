"""Mapping of domain exceptions onto HTTP errors."""

from fastapi import HTTPException, status

from review_summary.exceptions import (
    GenerationError,
    InvalidReviewError,
    NoReviewsError,
    ReviewNotFoundError,
    ReviewSummaryError,
    StoreUnavailableError,
    UnauthorizedError,
)

_STATUS_BY_ERROR: list[tuple[type[ReviewSummaryError], int]] = [
    (StoreUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (NoReviewsError, status.HTTP_404_NOT_FOUND),
    (ReviewNotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidReviewError, status.HTTP_400_BAD_REQUEST),
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (GenerationError, status.HTTP_502_BAD_GATEWAY),
]


def to_http_exception(error: ReviewSummaryError, action: str) -> HTTPException:
    """Build the HTTPException for a domain error.

    Args:
        error: The domain error raised by a service
        action: What the handler was doing, used as the message prefix
    """
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=f"{action}: {error}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"{action}: {error}",
    )
