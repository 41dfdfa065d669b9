"""Review Summary - cached AI summaries of therapist reviews.

This package provides a layered architecture for review summarization:

Layers:
    - protocols: Interface contracts (ReviewStore, PromptConfigStore, SummaryCacheStore, TextGenerator)
    - repositories: Data access implementations (Redis, OpenAI-compatible chat API)
    - services: Business logic (aggregation, prompt configs, cache, orchestration)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from review_summary.config import get_redis_client
    from review_summary.repositories import (
        OpenAITextGenerator,
        RedisPromptConfigRepository,
        RedisReviewRepository,
        RedisSummaryCacheRepository,
    )
    from review_summary.services import (
        PromptConfigService,
        ReviewAggregator,
        SummaryCacheService,
        SummaryService,
    )

    client = get_redis_client()
    service = SummaryService(
        aggregator=ReviewAggregator(RedisReviewRepository(client)),
        prompt_configs=PromptConfigService(RedisPromptConfigRepository(client)),
        cache=SummaryCacheService(RedisSummaryCacheRepository(client)),
        generator=OpenAITextGenerator.create(),
    )
    result = await service.get_review_summary(42)
    ```

For HTTP API:
    ```python
    from review_summary.api.app import app
    ```
"""

from review_summary.config import get_redis_client, settings
from review_summary.entities import (
    PromptConfigEntity,
    ReviewEntity,
    ReviewSummaryEntity,
    SummaryCacheEntryEntity,
)
from review_summary.exceptions import (
    GenerationError,
    NoReviewsError,
    ReviewSummaryError,
    StoreUnavailableError,
)
from review_summary.handlers import AdminHandler, SummaryHandler
from review_summary.protocols import PromptConfigStore, ReviewStore, SummaryCacheStore, TextGenerator
from review_summary.repositories import (
    OpenAITextGenerator,
    RedisPromptConfigRepository,
    RedisReviewRepository,
    RedisSummaryCacheRepository,
)
from review_summary.services import (
    PromptConfigService,
    PromptTestService,
    ReviewAggregator,
    SummaryCacheService,
    SummaryService,
)
from review_summary.utils import hash_text

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "PromptConfigStore",
    "ReviewStore",
    "SummaryCacheStore",
    "TextGenerator",
    # Services (business logic)
    "PromptConfigService",
    "PromptTestService",
    "ReviewAggregator",
    "SummaryCacheService",
    "SummaryService",
    # Handlers (HTTP)
    "AdminHandler",
    "SummaryHandler",
    # Repositories (data access)
    "OpenAITextGenerator",
    "RedisPromptConfigRepository",
    "RedisReviewRepository",
    "RedisSummaryCacheRepository",
    # Entities (domain models)
    "PromptConfigEntity",
    "ReviewEntity",
    "ReviewSummaryEntity",
    "SummaryCacheEntryEntity",
    # Errors
    "GenerationError",
    "NoReviewsError",
    "ReviewSummaryError",
    "StoreUnavailableError",
    # Utilities
    "hash_text",
]
