"""Summary generation orchestrator.

Ties review aggregation, prompt configuration, the summary cache and the
text generator together:

    reviews -> active prompt -> input hash -> cache lookup
        hit:  return cached summary
        miss / expired / forced: generate -> store (7 day TTL) -> return
"""

import logging
from contextlib import AbstractAsyncContextManager, nullcontext

from review_summary.config import settings
from review_summary.entities import PromptConfigEntity, ReviewSummaryEntity
from review_summary.protocols import TextGenerator
from review_summary.utils import hash_text

from .prompt_config_service import PromptConfigService
from .review_aggregator import ReviewAggregator
from .single_flight import KeyedLock
from .summary_cache_service import SummaryCacheService

logger = logging.getLogger(__name__)

ENTITY_TYPE = "therapist_reviews"


def build_messages(system_message: str, prompt: str) -> list[dict[str, str]]:
    """Build the two-message exchange sent to the text generator."""
    return [
        {"role": "system", "content": system_message},
        {"role": "user", "content": prompt},
    ]


class SummaryService:
    """Returns cached or freshly generated review summaries.

    With ``single_flight`` enabled, concurrent misses for the same key inside
    one process share a lock: the first caller generates, later callers re-read
    the cache once the lock is free. Without it, concurrent misses may each
    call the generator and the last write wins.

    Example:
        ```python
        service = SummaryService(
            aggregator=ReviewAggregator(review_repo),
            prompt_configs=PromptConfigService(prompt_repo),
            cache=SummaryCacheService(cache_repo),
            generator=OpenAITextGenerator.create(),
        )
        result = await service.get_review_summary(42)
        ```
    """

    def __init__(
        self,
        aggregator: ReviewAggregator,
        prompt_configs: PromptConfigService,
        cache: SummaryCacheService,
        generator: TextGenerator,
        prompt_name: str | None = None,
        single_flight: bool | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            aggregator: Review loading and rendering.
            prompt_configs: Source of the active prompt configuration.
            cache: Summary cache.
            generator: Text generation service.
            prompt_name: Prompt configuration name. Defaults to settings.
            single_flight: Serialize generation per cache key. Defaults to settings.
        """
        self._aggregator = aggregator
        self._prompt_configs = prompt_configs
        self._cache = cache
        self._generator = generator
        self._prompt_name = prompt_name or settings.summary_prompt_name
        self._single_flight = settings.summary_single_flight if single_flight is None else single_flight
        self._locks = KeyedLock()

    @property
    def prompt_name(self) -> str:
        return self._prompt_name

    def _guard(self, key: str) -> AbstractAsyncContextManager[None]:
        if self._single_flight:
            return self._locks.hold(key)
        return nullcontext()

    def _cached(self, therapist_id: int, input_hash: str, review_count: int) -> ReviewSummaryEntity | None:
        entry = self._cache.lookup(ENTITY_TYPE, therapist_id, input_hash)
        if entry is None:
            return None

        logger.info("Summary cache hit for therapist %s", therapist_id)
        return ReviewSummaryEntity(
            summary=entry.summary,
            review_count=review_count,
            cached=True,
            cached_at=entry.created_at,
        )

    async def _generate(self, config: PromptConfigEntity, reviews_text: str) -> str:
        messages = build_messages(config.system_message or "", config.fill(reviews_text))
        text = await self._generator.generate(messages)
        return text.strip() if isinstance(text, str) else ""

    async def get_review_summary(
        self,
        therapist_id: int,
        force_refresh: bool = False,
    ) -> ReviewSummaryEntity:
        """Return the summary for a therapist's reviews.

        Args:
            therapist_id: Therapist to summarize
            force_refresh: Skip the cache lookup and always regenerate

        Returns:
            ReviewSummaryEntity; ``summary`` is None when there are no reviews

        Raises:
            StoreUnavailableError: If the store cannot be reached
            GenerationError: If the text generator fails (nothing is cached)
        """
        reviews = self._aggregator.fetch(therapist_id)
        if not reviews:
            return ReviewSummaryEntity(summary=None, review_count=0, cached=False)

        config = self._prompt_configs.get_active(self._prompt_name)
        reviews_text = self._aggregator.render(reviews)
        input_hash = hash_text(reviews_text + config.prompt_template)

        if not force_refresh:
            hit = self._cached(therapist_id, input_hash, len(reviews))
            if hit is not None:
                return hit

        async with self._guard(f"{ENTITY_TYPE}:{therapist_id}:{input_hash}"):
            # Another request may have filled the cache while we waited
            if not force_refresh and self._single_flight:
                hit = self._cached(therapist_id, input_hash, len(reviews))
                if hit is not None:
                    return hit

            logger.info(
                "Generating summary for therapist %s (%d reviews, forced=%s)",
                therapist_id,
                len(reviews),
                force_refresh,
            )
            summary = await self._generate(config, reviews_text)
            self._cache.store(
                entity_type=ENTITY_TYPE,
                entity_id=therapist_id,
                prompt_name=self._prompt_name,
                summary=summary,
                input_hash=input_hash,
            )

        return ReviewSummaryEntity(summary=summary, review_count=len(reviews), cached=False)

    def clear_cache(self, therapist_id: int) -> int:
        """Delete every cached summary for a therapist.

        Returns:
            Number of entries deleted
        """
        return self._cache.clear(ENTITY_TYPE, therapist_id)
