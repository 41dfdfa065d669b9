"""OpenAI-compatible chat completion provider.

Talks to any endpoint implementing ``POST {base_url}/chat/completions``
(OpenAI, OpenRouter, vLLM, LiteLLM proxy, Ollama's OpenAI shim, ...).
"""

import logging
from typing import Any

import httpx

from review_summary.config import settings
from review_summary.exceptions import GenerationError

logger = logging.getLogger(__name__)


class OpenAITextGenerator:
    """OpenAI-compatible implementation of the TextGenerator protocol.

    This class satisfies the TextGenerator protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        generator = OpenAITextGenerator.create()
        text = await generator.generate([
            {"role": "system", "content": "You are terse."},
            {"role": "user", "content": "Say hi"},
        ])
        await generator.close()
        ```
    """

    def __init__(
        self,
        model_name: str | None = None,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            model_name: Model identifier. Defaults to settings.llm_model.
            base_url: API base URL. Defaults to settings.llm_base_url.
            api_key: Bearer token. Defaults to settings.llm_api_key.
            timeout: Request timeout in seconds. Defaults to settings.llm_timeout.
            client: Pre-built async client (tests inject one with a mock transport).
        """
        self._model_name = model_name or settings.llm_model
        self._base_url = (base_url or settings.llm_base_url).rstrip("/")
        self._api_key = api_key if api_key is not None else settings.llm_api_key
        self._timeout = timeout or settings.llm_timeout
        self._client = client

    @classmethod
    def create(
        cls,
        model_name: str | None = None,
        base_url: str | None = None,
        api_key: str | None = None,
    ) -> "OpenAITextGenerator":
        """Factory method to create OpenAITextGenerator with defaults from settings."""
        return cls(model_name=model_name, base_url=base_url, api_key=api_key)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client."""
        if self._client is None:
            headers = {"Authorization": f"Bearer {self._api_key}"} if self._api_key else {}
            self._client = httpx.AsyncClient(timeout=self._timeout, headers=headers)
        return self._client

    @property
    def model_name(self) -> str:
        return self._model_name

    @staticmethod
    def _extract_content(data: Any) -> str:
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            return ""
        return content if isinstance(content, str) else ""

    async def generate(self, messages: list[dict[str, str]]) -> str:
        """Send the conversation and return the completion text.

        Raises:
            GenerationError: On transport errors, non-2xx responses or a non-JSON body
        """
        url = f"{self._base_url}/chat/completions"
        payload = {"model": self._model_name, "messages": messages}

        logger.debug("Calling %s with model %s", url, self._model_name)
        try:
            response = await self.client.post(url, json=payload)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            raise GenerationError(f"Text generation request failed: {e}") from e
        except ValueError as e:
            raise GenerationError(f"Text generation returned invalid JSON: {e}") from e

        return self._extract_content(data)

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
