"""Repository layer for data access.

This layer abstracts external dependencies (Redis, text-generation APIs)
behind protocol-based interfaces. This enables:
- Easy swapping of implementations
- Unit testing with in-memory implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from .openai_text_generator import OpenAITextGenerator
from .redis_prompt_config_repository import RedisPromptConfigRepository
from .redis_review_repository import RedisReviewRepository
from .redis_summary_cache_repository import RedisSummaryCacheRepository

__all__ = [
    "OpenAITextGenerator",
    "RedisPromptConfigRepository",
    "RedisReviewRepository",
    "RedisSummaryCacheRepository",
]
