"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Clients, services and handlers are built in the lifespan and stored in app.state
    - Dependency functions retrieve them from request.app.state
    - The Redis and HTTP clients are closed on shutdown; nothing is a module-level singleton
"""

import logging
import secrets
from contextlib import asynccontextmanager
from typing import Annotated

import redis
from fastapi import Depends, FastAPI, Header, HTTPException, Request, status

from review_summary.config import Settings, configure_logging, get_redis_client, settings
from review_summary.exceptions import UnauthorizedError
from review_summary.handlers import AdminHandler, SummaryHandler
from review_summary.handlers.errors import to_http_exception
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

logger = logging.getLogger(__name__)


def build_handlers(
    review_store: ReviewStore,
    prompt_store: PromptConfigStore,
    cache_store: SummaryCacheStore,
    generator: TextGenerator,
    config: Settings = settings,
) -> tuple[SummaryHandler, AdminHandler]:
    """Wire repositories into services and services into handlers."""
    aggregator = ReviewAggregator(review_store, approved_only=config.summary_approved_only)
    prompt_configs = PromptConfigService(prompt_store)
    summary_service = SummaryService(
        aggregator=aggregator,
        prompt_configs=prompt_configs,
        cache=SummaryCacheService(cache_store, ttl=config.summary_cache_ttl),
        generator=generator,
        prompt_name=config.summary_prompt_name,
        single_flight=config.summary_single_flight,
    )

    summary_handler = SummaryHandler(summary_service=summary_service, aggregator=aggregator)
    admin_handler = AdminHandler(
        prompt_configs=prompt_configs,
        prompt_tester=PromptTestService(aggregator, generator),
        summary_service=summary_service,
        aggregator=aggregator,
    )
    return summary_handler, admin_handler


def get_summary_handler(request: Request) -> SummaryHandler:
    """Dependency injection for SummaryHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "summary_handler", None)
    if handler is None:
        raise RuntimeError("SummaryHandler not initialized. Check lifespan setup.")
    return handler


def get_admin_handler(request: Request) -> AdminHandler:
    """Dependency injection for AdminHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "admin_handler", None)
    if handler is None:
        raise RuntimeError("AdminHandler not initialized. Check lifespan setup.")
    return handler


def get_review_store(request: Request) -> ReviewStore | None:
    return getattr(request.app.state, "review_store", None)


def get_admin_token() -> str | None:
    """The configured admin token (overridable in tests)."""
    return settings.admin_api_token


def require_admin(
    expected: Annotated[str | None, Depends(get_admin_token)],
    x_admin_token: Annotated[str | None, Header()] = None,
) -> None:
    """Reject the request unless it carries the admin token.

    Raises:
        HTTPException: 403 if no admin token is configured, 401 if the header is missing or wrong
    """
    if not expected:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin operations are disabled: ADMIN_API_TOKEN is not configured",
        )
    if x_admin_token is None or not secrets.compare_digest(x_admin_token, expected):
        raise to_http_exception(UnauthorizedError("admin token missing or invalid"), "Admin access denied")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Clients (Redis, text generation) - created explicitly, closed on shutdown
    2. Repositories and services
    3. Handlers - stored in app.state.summary_handler / app.state.admin_handler
    """
    configure_logging()

    redis_client = get_redis_client()
    try:
        redis_client.ping()
        logger.info("Redis connection successful (%s)", settings.redis_url)
    except redis.exceptions.RedisError as e:
        # Requests fail with 503 until the store comes back
        logger.warning("Redis connection failed: %s", e)

    generator = OpenAITextGenerator.create()
    review_store = RedisReviewRepository(redis_client)
    summary_handler, admin_handler = build_handlers(
        review_store=review_store,
        prompt_store=RedisPromptConfigRepository(redis_client),
        cache_store=RedisSummaryCacheRepository(redis_client),
        generator=generator,
    )

    app.state.review_store = review_store
    app.state.summary_handler = summary_handler
    app.state.admin_handler = admin_handler
    logger.info(
        "Review summary service initialized (model=%s, ttl=%ss, single_flight=%s)",
        generator.model_name,
        settings.summary_cache_ttl,
        settings.summary_single_flight,
    )

    yield

    del app.state.admin_handler
    del app.state.summary_handler
    del app.state.review_store
    await generator.close()
    redis_client.close()
    logger.info("Review summary service shut down")


# Type aliases for cleaner dependency injection
SummaryHandlerDep = Annotated[SummaryHandler, Depends(get_summary_handler)]
AdminHandlerDep = Annotated[AdminHandler, Depends(get_admin_handler)]
ReviewStoreDep = Annotated[ReviewStore | None, Depends(get_review_store)]
