"""Shared fixtures: in-memory protocol implementations and a controllable clock."""

from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from review_summary.entities import PromptConfigEntity, ReviewEntity, SummaryCacheEntryEntity
from review_summary.services import (
    PromptConfigService,
    PromptTestService,
    ReviewAggregator,
    SummaryCacheService,
    SummaryService,
)


class FakeClock:
    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


class InMemoryReviewStore:
    def __init__(self, clock: FakeClock) -> None:
        self._clock = clock
        self._reviews: dict[int, ReviewEntity] = {}
        self._next_id = 1
        self.list_calls = 0

    def add(self, therapist_id, rating, review_text, reviewer_name=None):
        review = ReviewEntity(
            id=self._next_id,
            therapist_id=therapist_id,
            rating=rating,
            review_text=review_text,
            created_at=self._clock(),
            reviewer_name=reviewer_name,
        )
        self._reviews[review.id] = review
        self._next_id += 1
        return review

    def get(self, review_id):
        return self._reviews.get(review_id)

    def set_approval(self, review_id, is_approved):
        review = self._reviews.get(review_id)
        if review is None:
            return None
        self._reviews[review_id] = replace(review, is_approved=is_approved)
        return self._reviews[review_id]

    def list_for_therapist(self, therapist_id, approved_only=True):
        self.list_calls += 1
        reviews = [
            r for r in self._reviews.values() if r.therapist_id == therapist_id and (r.is_approved or not approved_only)
        ]
        return sorted(reviews, key=lambda r: (r.created_at, r.id), reverse=True)

    def health_check(self):
        return True


class InMemoryPromptConfigStore:
    def __init__(self) -> None:
        self.rows: dict[str, PromptConfigEntity] = {}

    def get(self, name):
        return self.rows.get(name)

    def save(self, config):
        self.rows[config.name] = config


class InMemorySummaryCacheStore:
    def __init__(self) -> None:
        self.rows: dict[tuple[str, int, str], SummaryCacheEntryEntity] = {}
        self.upserts = 0

    def find(self, entity_type, entity_id, input_hash):
        return self.rows.get((entity_type, entity_id, input_hash))

    def upsert(self, entry):
        self.upserts += 1
        self.rows[(entry.entity_type, entry.entity_id, entry.input_hash)] = entry

    def delete_entity(self, entity_type, entity_id):
        keys = [k for k in self.rows if k[0] == entity_type and k[1] == entity_id]
        for key in keys:
            del self.rows[key]
        return len(keys)

    def count_entity(self, entity_type, entity_id):
        return sum(1 for k in self.rows if k[0] == entity_type and k[1] == entity_id)


class FakeGenerator:
    """Returns queued replies in order (the last one repeats) and records every call."""

    def __init__(self, *replies: object, error: Exception | None = None) -> None:
        self.replies = list(replies) or ["A balanced summary."]
        self.error = error
        self.calls: list[list[dict[str, str]]] = []

    @property
    def model_name(self) -> str:
        return "fake-model"

    async def generate(self, messages):
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        if len(self.replies) > 1:
            return self.replies.pop(0)
        return self.replies[0]

    async def close(self):
        pass


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def review_store(clock) -> InMemoryReviewStore:
    return InMemoryReviewStore(clock)


@pytest.fixture
def prompt_store() -> InMemoryPromptConfigStore:
    return InMemoryPromptConfigStore()


@pytest.fixture
def cache_store() -> InMemorySummaryCacheStore:
    return InMemorySummaryCacheStore()


@pytest.fixture
def generator() -> FakeGenerator:
    return FakeGenerator("X")


@pytest.fixture
def aggregator(review_store) -> ReviewAggregator:
    return ReviewAggregator(review_store, approved_only=True)


@pytest.fixture
def prompt_configs(prompt_store, clock) -> PromptConfigService:
    return PromptConfigService(prompt_store, clock=clock)


@pytest.fixture
def cache(cache_store, clock) -> SummaryCacheService:
    return SummaryCacheService(cache_store, ttl=7 * 24 * 3600, clock=clock)


@pytest.fixture
def summary_service(aggregator, prompt_configs, cache, generator) -> SummaryService:
    return SummaryService(
        aggregator=aggregator,
        prompt_configs=prompt_configs,
        cache=cache,
        generator=generator,
        prompt_name="review_summary",
        single_flight=True,
    )


@pytest.fixture
def prompt_tester(aggregator, generator) -> PromptTestService:
    return PromptTestService(aggregator, generator)


def add_approved(store: InMemoryReviewStore, clock: FakeClock, therapist_id: int, rating: int, text: str):
    """Add an approved review one second after the previous one."""
    clock.advance(seconds=1)
    review = store.add(therapist_id, rating, text)
    return store.set_approval(review.id, True)


