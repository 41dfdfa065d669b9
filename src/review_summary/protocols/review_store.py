"""Review storage protocol.

Defines the interface for any backend that persists therapist reviews.
"""

from typing import Protocol, runtime_checkable

from review_summary.entities import ReviewEntity


@runtime_checkable
class ReviewStore(Protocol):
    """Protocol for review storage backends."""

    def add(
        self,
        therapist_id: int,
        rating: int,
        review_text: str,
        reviewer_name: str | None = None,
    ) -> ReviewEntity:
        """Persist a new, unapproved review.

        Returns:
            The stored review with its assigned id and creation time
        """
        ...

    def get(self, review_id: int) -> ReviewEntity | None:
        """Fetch a single review by id, or None if it does not exist."""
        ...

    def set_approval(self, review_id: int, is_approved: bool) -> ReviewEntity | None:
        """Update the approval flag.

        Returns:
            The updated review, or None if the id does not exist
        """
        ...

    def list_for_therapist(
        self,
        therapist_id: int,
        approved_only: bool = True,
    ) -> list[ReviewEntity]:
        """List a therapist's reviews, newest first (ties by id, highest first).

        Returns:
            Possibly empty list of reviews
        """
        ...

    def health_check(self) -> bool:
        """Check if the store is accessible."""
        ...
