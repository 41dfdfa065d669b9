"""Redis implementation of PromptConfigStore.

Each configuration is one hash at ``{prefix}:prompt:{name}``.
"""

from datetime import datetime

import redis

from review_summary.config import settings
from review_summary.entities import PromptConfigEntity

from .redis_errors import store_errors


class RedisPromptConfigRepository:
    """Redis implementation of the PromptConfigStore protocol."""

    def __init__(self, redis_client: redis.Redis, key_prefix: str | None = None) -> None:
        self._client = redis_client
        self._prefix = key_prefix or settings.key_prefix

    def _key(self, name: str) -> str:
        return f"{self._prefix}:prompt:{name}"

    def get(self, name: str) -> PromptConfigEntity | None:
        with store_errors("prompt config lookup"):
            data: dict[str, str] = self._client.hgetall(self._key(name))  # type: ignore[assignment]
        if not data:
            return None

        return PromptConfigEntity(
            name=data["name"],
            prompt_template=data["prompt_template"],
            system_message=data.get("system_message"),
            description=data.get("description"),
            is_active=data.get("is_active", "1") == "1",
            created_at=datetime.fromisoformat(data["created_at"]),
            updated_at=datetime.fromisoformat(data["updated_at"]),
        )

    def save(self, config: PromptConfigEntity) -> None:
        if config.created_at is None or config.updated_at is None:
            raise ValueError("Persisted prompt configs need created_at and updated_at")

        mapping = {
            "name": config.name,
            "prompt_template": config.prompt_template,
            "is_active": "1" if config.is_active else "0",
            "created_at": config.created_at.isoformat(),
            "updated_at": config.updated_at.isoformat(),
        }
        # Absent optional fields are omitted rather than stored as empty strings
        if config.system_message is not None:
            mapping["system_message"] = config.system_message
        if config.description is not None:
            mapping["description"] = config.description

        key = self._key(config.name)
        with store_errors("prompt config write"):
            pipe = self._client.pipeline()
            pipe.delete(key)
            pipe.hset(key, mapping=mapping)
            pipe.execute()
