"""Redis implementation of SummaryCacheStore.

Each entry is one hash at ``{prefix}:summary:{entity_type}:{entity_id}:{input_hash}``.
Entries with an ``expires_at`` also carry a native Redis expiry at the same
instant, so expired rows are eventually reclaimed without a sweeper.
"""

import logging
from datetime import datetime

import redis

from review_summary.config import settings
from review_summary.entities import SummaryCacheEntryEntity

from .redis_errors import store_errors

logger = logging.getLogger(__name__)


class RedisSummaryCacheRepository:
    """Redis implementation of the SummaryCacheStore protocol.

    Writes go through a pipeline (delete, hset, expireat) so that storing a
    key that already exists replaces the old row instead of adding a second one.
    """

    def __init__(self, redis_client: redis.Redis, key_prefix: str | None = None) -> None:
        self._client = redis_client
        self._prefix = key_prefix or settings.key_prefix

    def _entity_pattern(self, entity_type: str, entity_id: int) -> str:
        return f"{self._prefix}:summary:{entity_type}:{entity_id}:*"

    def _key(self, entity_type: str, entity_id: int, input_hash: str) -> str:
        return f"{self._prefix}:summary:{entity_type}:{entity_id}:{input_hash}"

    def find(
        self,
        entity_type: str,
        entity_id: int,
        input_hash: str,
    ) -> SummaryCacheEntryEntity | None:
        with store_errors("summary cache lookup"):
            data: dict[str, str] = self._client.hgetall(  # type: ignore[assignment]
                self._key(entity_type, entity_id, input_hash)
            )
        if not data:
            return None

        expires_at = data.get("expires_at")
        return SummaryCacheEntryEntity(
            entity_type=entity_type,
            entity_id=entity_id,
            input_hash=input_hash,
            prompt_name=data.get("prompt_name", ""),
            summary=data.get("summary", ""),
            created_at=datetime.fromisoformat(data["created_at"]),
            expires_at=datetime.fromisoformat(expires_at) if expires_at else None,
        )

    def upsert(self, entry: SummaryCacheEntryEntity) -> None:
        key = self._key(entry.entity_type, entry.entity_id, entry.input_hash)
        mapping = {
            "prompt_name": entry.prompt_name,
            "summary": entry.summary,
            "created_at": entry.created_at.isoformat(),
        }
        if entry.expires_at is not None:
            mapping["expires_at"] = entry.expires_at.isoformat()

        with store_errors("summary cache write"):
            pipe = self._client.pipeline()
            pipe.delete(key)
            pipe.hset(key, mapping=mapping)
            if entry.expires_at is not None:
                pipe.expireat(key, entry.expires_at)
            pipe.execute()

    def delete_entity(self, entity_type: str, entity_id: int) -> int:
        with store_errors("summary cache clear"):
            keys = list(self._client.scan_iter(match=self._entity_pattern(entity_type, entity_id)))
            if not keys:
                return 0
            deleted: int = self._client.delete(*keys)  # type: ignore[assignment]

        logger.debug("Deleted %d summary rows for %s:%s", deleted, entity_type, entity_id)
        return deleted

    def count_entity(self, entity_type: str, entity_id: int) -> int:
        with store_errors("summary cache count"):
            return sum(1 for _ in self._client.scan_iter(match=self._entity_pattern(entity_type, entity_id)))
