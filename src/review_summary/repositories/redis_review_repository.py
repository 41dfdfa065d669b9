"""Redis implementation of ReviewStore.

Layout:
    {prefix}:review:next_id             INCR counter for review ids
    {prefix}:review:{id}                hash with the review fields
    {prefix}:therapist:{tid}:reviews    sorted set of review ids scored by creation time
"""

import logging
from datetime import datetime

import redis

from review_summary.config import settings
from review_summary.entities import ReviewEntity
from review_summary.utils import Clock, utc_now

from .redis_errors import store_errors

logger = logging.getLogger(__name__)


class RedisReviewRepository:
    """Redis implementation of the ReviewStore protocol.

    This class satisfies the protocol through structural typing -
    no explicit inheritance needed.
    """

    def __init__(
        self,
        redis_client: redis.Redis,
        key_prefix: str | None = None,
        clock: Clock = utc_now,
    ) -> None:
        """Initialize the review repository.

        Args:
            redis_client: Redis client created with ``decode_responses=True``.
            key_prefix: Namespace for all keys. Defaults to settings.
            clock: Source of the current time for ``created_at``.
        """
        self._client = redis_client
        self._prefix = key_prefix or settings.key_prefix
        self._clock = clock

    def _review_key(self, review_id: int) -> str:
        return f"{self._prefix}:review:{review_id}"

    def _index_key(self, therapist_id: int) -> str:
        return f"{self._prefix}:therapist:{therapist_id}:reviews"

    @staticmethod
    def _to_entity(data: dict[str, str]) -> ReviewEntity:
        return ReviewEntity(
            id=int(data["id"]),
            therapist_id=int(data["therapist_id"]),
            rating=int(data["rating"]),
            review_text=data.get("review_text", ""),
            created_at=datetime.fromisoformat(data["created_at"]),
            reviewer_name=data.get("reviewer_name") or None,
            is_approved=data.get("is_approved") == "1",
        )

    def add(
        self,
        therapist_id: int,
        rating: int,
        review_text: str,
        reviewer_name: str | None = None,
    ) -> ReviewEntity:
        """Store a new unapproved review and index it under its therapist."""
        with store_errors("review insert"):
            review_id = int(self._client.incr(f"{self._prefix}:review:next_id"))  # type: ignore[arg-type]
            review = ReviewEntity(
                id=review_id,
                therapist_id=therapist_id,
                rating=rating,
                review_text=review_text,
                created_at=self._clock(),
                reviewer_name=reviewer_name,
                is_approved=False,
            )

            pipe = self._client.pipeline()
            pipe.hset(
                self._review_key(review_id),
                mapping={
                    "id": str(review.id),
                    "therapist_id": str(review.therapist_id),
                    "rating": str(review.rating),
                    "review_text": review.review_text,
                    "reviewer_name": review.reviewer_name or "",
                    "is_approved": "0",
                    "created_at": review.created_at.isoformat(),
                },
            )
            pipe.zadd(self._index_key(therapist_id), {str(review_id): review.created_at.timestamp()})
            pipe.execute()

        logger.debug("Stored review %s for therapist %s", review_id, therapist_id)
        return review

    def get(self, review_id: int) -> ReviewEntity | None:
        with store_errors("review lookup"):
            data: dict[str, str] = self._client.hgetall(self._review_key(review_id))  # type: ignore[assignment]
        if not data:
            return None
        return self._to_entity(data)

    def set_approval(self, review_id: int, is_approved: bool) -> ReviewEntity | None:
        key = self._review_key(review_id)
        with store_errors("review approval"):
            if not self._client.exists(key):
                return None
            self._client.hset(key, "is_approved", "1" if is_approved else "0")
        return self.get(review_id)

    def list_for_therapist(
        self,
        therapist_id: int,
        approved_only: bool = True,
    ) -> list[ReviewEntity]:
        with store_errors("review listing"):
            review_ids: list[str] = self._client.zrange(self._index_key(therapist_id), 0, -1)  # type: ignore[assignment]
            if not review_ids:
                return []

            pipe = self._client.pipeline()
            for review_id in review_ids:
                pipe.hgetall(self._review_key(int(review_id)))
            rows: list[dict[str, str]] = pipe.execute()

        reviews = [self._to_entity(row) for row in rows if row]
        if approved_only:
            reviews = [r for r in reviews if r.is_approved]

        # Newest first; the id breaks ties so the order is reproducible.
        reviews.sort(key=lambda r: (r.created_at, r.id), reverse=True)
        return reviews

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.exceptions.RedisError:
            return False
