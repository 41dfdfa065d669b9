"""Summary cache storage protocol.

Defines the interface for any backend that keeps generated summaries
keyed by (entity_type, entity_id, input_hash).
"""

from typing import Protocol, runtime_checkable

from review_summary.entities import SummaryCacheEntryEntity


@runtime_checkable
class SummaryCacheStore(Protocol):
    """Protocol for summary cache backends.

    A write for a key that already exists replaces the previous row, so a
    backend never holds more than one row per key.
    """

    def find(
        self,
        entity_type: str,
        entity_id: int,
        input_hash: str,
    ) -> SummaryCacheEntryEntity | None:
        """Fetch the row for a key, expired or not.

        Returns:
            The stored entry, or None if absent
        """
        ...

    def upsert(self, entry: SummaryCacheEntryEntity) -> None:
        """Insert the entry, replacing any row with the same key."""
        ...

    def delete_entity(self, entity_type: str, entity_id: int) -> int:
        """Delete every row for an entity regardless of hash.

        Returns:
            Number of rows deleted
        """
        ...

    def count_entity(self, entity_type: str, entity_id: int) -> int:
        """Count rows stored for an entity."""
        ...
