"""Summary cache entry domain entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SummaryCacheEntryEntity:
    """A previously generated summary keyed by entity and input hash.

    Attributes:
        entity_type: Tag for what is summarized (e.g. "therapist_reviews")
        entity_id: Id of the summarized entity
        input_hash: SHA-256 digest of the generation input
        prompt_name: Name of the prompt configuration used
        summary: The generated summary text
        created_at: When the summary was generated (UTC)
        expires_at: Expiry time, or None for an entry that never expires
    """

    entity_type: str
    entity_id: int
    input_hash: str
    prompt_name: str
    summary: str
    created_at: datetime
    expires_at: datetime | None = None

    def is_valid(self, now: datetime) -> bool:
        """Return True if the entry has no expiry or expires after ``now``."""
        return self.expires_at is None or self.expires_at > now
