#!/usr/bin/env python3
"""
Demo script for the review summary service.

Seeds a few approved reviews for one therapist into Redis, then requests the
summary twice to show a cache miss followed by a cache hit.

Requires a running Redis and LLM_BASE_URL / LLM_API_KEY in the environment.
"""

import asyncio
import time

from review_summary.config import configure_logging, get_redis_client
from review_summary.repositories import (
    OpenAITextGenerator,
    RedisPromptConfigRepository,
    RedisReviewRepository,
    RedisSummaryCacheRepository,
)
from review_summary.services import PromptConfigService, ReviewAggregator, SummaryCacheService, SummaryService

THERAPIST_ID = 1

SAMPLE_REVIEWS = [
    (5, "Dr. Mitchell helped me work through years of anxiety. Patient, warm and practical."),
    (4, "Good listener and the CBT homework helped, although scheduling was sometimes hard."),
    (5, "I finally feel understood. The sessions gave me tools I use every day."),
    (3, "Helpful overall, but I wanted more structure in our early sessions."),
]


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


async def main() -> None:
    configure_logging()
    client = get_redis_client()
    generator = OpenAITextGenerator.create()

    reviews = RedisReviewRepository(client)
    aggregator = ReviewAggregator(reviews, approved_only=True)
    service = SummaryService(
        aggregator=aggregator,
        prompt_configs=PromptConfigService(RedisPromptConfigRepository(client)),
        cache=SummaryCacheService(RedisSummaryCacheRepository(client)),
        generator=generator,
    )

    try:
        print_section("Seeding reviews")
        if not aggregator.fetch(THERAPIST_ID):
            for rating, text in SAMPLE_REVIEWS:
                review = aggregator.submit(THERAPIST_ID, rating, text)
                aggregator.set_approval(review.id, True)
                print(f"  ✓ Review {review.id}: {rating}/5")
        stats = aggregator.rating_stats(THERAPIST_ID)
        print(f"  {stats.review_count} approved reviews, average {stats.average_rating}")

        for attempt in ("first request", "second request"):
            print_section(attempt.capitalize())
            start = time.time()
            result = await service.get_review_summary(THERAPIST_ID)
            elapsed_ms = (time.time() - start) * 1000
            print(f"  cached={result.cached}  ({elapsed_ms:.0f} ms)")
            print(f"\n{result.summary}")
    finally:
        await generator.close()
        client.close()


if __name__ == "__main__":
    asyncio.run(main())
