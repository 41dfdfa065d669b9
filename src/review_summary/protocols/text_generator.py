"""Text generation protocol.

Defines the interface for any chat-style completion service.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class TextGenerator(Protocol):
    """Protocol for text generation services.

    ``messages`` is an ordered list of ``{"role": ..., "content": ...}`` dicts.
    """

    @property
    def model_name(self) -> str:
        """Return the name/identifier of the model."""
        ...

    async def generate(self, messages: list[dict[str, str]]) -> str:
        """Return the completion text for the conversation.

        Non-string or absent content is returned as an empty string.

        Raises:
            GenerationError: If the provider call fails
        """
        ...

    async def close(self) -> None:
        """Release any underlying connections."""
        ...
