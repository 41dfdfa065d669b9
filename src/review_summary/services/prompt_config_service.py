"""Prompt configuration with a built-in default fallback."""

import logging
from dataclasses import replace
from typing import Literal

from review_summary.entities import DEFAULT_SYSTEM_MESSAGE, PromptConfigEntity
from review_summary.protocols import PromptConfigStore
from review_summary.utils import Clock, utc_now

logger = logging.getLogger(__name__)

UpsertAction = Literal["created", "updated"]


class PromptConfigService:
    """Reads and writes named prompt configurations.

    Stored rows always win over the built-in default. Updates overwrite in
    place; no history is kept.
    """

    def __init__(self, store: PromptConfigStore, clock: Clock = utc_now) -> None:
        self._store = store
        self._clock = clock

    def get(self, name: str) -> PromptConfigEntity:
        """Return the stored configuration (active or not), else the default."""
        return self._store.get(name) or PromptConfigEntity.default(name)

    def get_active(self, name: str) -> PromptConfigEntity:
        """Return the configuration to generate with.

        Falls back to the default when no active row exists. An empty template
        or system message on an active row falls back field by field.
        """
        config = self._store.get(name)
        if config is None or not config.is_active:
            return PromptConfigEntity.default(name)

        default = PromptConfigEntity.default(name)
        return replace(
            config,
            prompt_template=config.prompt_template or default.prompt_template,
            system_message=config.system_message or DEFAULT_SYSTEM_MESSAGE,
        )

    def upsert(
        self,
        name: str,
        prompt_template: str,
        system_message: str | None = None,
        description: str | None = None,
    ) -> UpsertAction:
        """Create the configuration or overwrite the existing one.

        On update, a None ``system_message`` or ``description`` keeps the stored value.

        Returns:
            "created" for a new row, "updated" otherwise
        """
        now = self._clock()
        existing = self._store.get(name)

        if existing is None:
            self._store.save(
                PromptConfigEntity(
                    name=name,
                    prompt_template=prompt_template,
                    system_message=system_message,
                    description=description,
                    is_active=True,
                    created_at=now,
                    updated_at=now,
                )
            )
            logger.info("Created prompt config %r", name)
            return "created"

        self._store.save(
            replace(
                existing,
                prompt_template=prompt_template,
                system_message=existing.system_message if system_message is None else system_message,
                description=existing.description if description is None else description,
                updated_at=now,
            )
        )
        logger.info("Updated prompt config %r", name)
        return "updated"
