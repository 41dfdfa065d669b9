"""Summary cache with time-based expiry."""

import logging
from datetime import timedelta

from review_summary.config import settings
from review_summary.entities import SummaryCacheEntryEntity
from review_summary.protocols import SummaryCacheStore
from review_summary.utils import Clock, utc_now

logger = logging.getLogger(__name__)


class SummaryCacheService:
    """Keyed lookup and write of generated summaries.

    An entry is valid iff its ``expires_at`` is None or in the future; expired
    rows may still exist in the store but are reported as misses.
    """

    def __init__(
        self,
        store: SummaryCacheStore,
        ttl: int | None = None,
        clock: Clock = utc_now,
    ) -> None:
        """Initialize the cache service.

        Args:
            store: Cache storage backend (required).
            ttl: Default time-to-live in seconds. Defaults to settings (7 days).
            clock: Source of the current time.
        """
        self._store = store
        self._ttl = ttl or settings.summary_cache_ttl
        self._clock = clock

    @property
    def ttl(self) -> int:
        return self._ttl

    def lookup(
        self,
        entity_type: str,
        entity_id: int,
        input_hash: str,
    ) -> SummaryCacheEntryEntity | None:
        """Return the entry for the key if it exists and has not expired."""
        entry = self._store.find(entity_type, entity_id, input_hash)
        if entry is None:
            return None
        if not entry.is_valid(self._clock()):
            logger.debug("Expired summary for %s:%s (%s)", entity_type, entity_id, input_hash[:12])
            return None
        return entry

    def store(
        self,
        entity_type: str,
        entity_id: int,
        prompt_name: str,
        summary: str,
        input_hash: str,
        ttl: int | None = None,
        expires: bool = True,
    ) -> SummaryCacheEntryEntity:
        """Write a summary with ``expires_at = now + ttl``.

        Args:
            ttl: Seconds until expiry. Defaults to the service TTL.
            expires: Pass False for an entry that never expires.

        Returns:
            The stored entry
        """
        ttl = ttl or self._ttl
        now = self._clock()
        entry = SummaryCacheEntryEntity(
            entity_type=entity_type,
            entity_id=entity_id,
            input_hash=input_hash,
            prompt_name=prompt_name,
            summary=summary,
            created_at=now,
            expires_at=now + timedelta(seconds=ttl) if expires else None,
        )
        self._store.upsert(entry)
        return entry

    def clear(self, entity_type: str, entity_id: int) -> int:
        """Delete every cached summary for the entity.

        Returns:
            Number of entries deleted
        """
        deleted = self._store.delete_entity(entity_type, entity_id)
        logger.info("Cleared %d cached summaries for %s:%s", deleted, entity_type, entity_id)
        return deleted
