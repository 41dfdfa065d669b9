"""Ad hoc prompt testing for administrators.

Runs a candidate template against one therapist's reviews without touching
the summary cache.
"""

import logging

from review_summary.entities import DEFAULT_SYSTEM_MESSAGE, PromptConfigEntity, PromptTestResultEntity
from review_summary.exceptions import NoReviewsError
from review_summary.protocols import TextGenerator

from .review_aggregator import ReviewAggregator
from .summary_service import build_messages

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 500


class PromptTestService:
    def __init__(self, aggregator: ReviewAggregator, generator: TextGenerator) -> None:
        self._aggregator = aggregator
        self._generator = generator

    async def test_prompt(
        self,
        prompt_template: str,
        therapist_id: int,
        system_message: str | None = None,
    ) -> PromptTestResultEntity:
        """Generate a summary with a candidate template, bypassing the cache.

        Raises:
            NoReviewsError: If the therapist has no reviews to test with
            GenerationError: If the text generator fails
        """
        reviews = self._aggregator.fetch(therapist_id)
        if not reviews:
            raise NoReviewsError(therapist_id)

        reviews_text = self._aggregator.render(reviews)
        candidate = PromptConfigEntity(name="prompt_test", prompt_template=prompt_template)
        messages = build_messages(system_message or DEFAULT_SYSTEM_MESSAGE, candidate.fill(reviews_text))

        logger.info("Testing candidate prompt against therapist %s", therapist_id)
        summary = await self._generator.generate(messages)

        return PromptTestResultEntity(
            summary=summary.strip() if isinstance(summary, str) else "",
            review_count=len(reviews),
            input_preview=reviews_text[:PREVIEW_LENGTH] + "...",
        )
