"""Prompt configuration storage protocol."""

from typing import Protocol, runtime_checkable

from review_summary.entities import PromptConfigEntity


@runtime_checkable
class PromptConfigStore(Protocol):
    """Protocol for prompt configuration backends.

    Implementations only persist rows; the built-in default fallback is
    applied by ``PromptConfigService``.
    """

    def get(self, name: str) -> PromptConfigEntity | None:
        """Fetch the stored configuration for ``name``, or None."""
        ...

    def save(self, config: PromptConfigEntity) -> None:
        """Create or overwrite the configuration stored under ``config.name``."""
        ...
