import pytest

from conftest import add_approved
from review_summary.entities import DEFAULT_SYSTEM_MESSAGE
from review_summary.exceptions import NoReviewsError


async def test_prompt_test_bypasses_cache(prompt_tester, generator, cache_store, review_store, clock):
    add_approved(review_store, clock, 42, 5, "Great")

    result = await prompt_tester.test_prompt("Summarize: {{reviews}}", therapist_id=42, system_message="Sys")

    assert result.summary == "X"
    assert result.review_count == 1
    assert result.input_preview == "Review 1 (5/5 stars):\nGreat\n\n..."
    assert generator.calls[0] == [
        {"role": "system", "content": "Sys"},
        {"role": "user", "content": "Summarize: Review 1 (5/5 stars):\nGreat\n\n"},
    ]
    assert cache_store.upserts == 0
    assert cache_store.rows == {}


async def test_prompt_test_uses_default_system_message(prompt_tester, generator, review_store, clock):
    add_approved(review_store, clock, 42, 4, "Good")

    await prompt_tester.test_prompt("{{reviews}}", therapist_id=42)

    assert generator.calls[0][0]["content"] == DEFAULT_SYSTEM_MESSAGE


async def test_prompt_test_preview_is_truncated(prompt_tester, review_store, clock):
    add_approved(review_store, clock, 42, 3, "x" * 2000)

    result = await prompt_tester.test_prompt("{{reviews}}", therapist_id=42)

    assert len(result.input_preview) == 503
    assert result.input_preview.endswith("...")


async def test_prompt_test_requires_reviews(prompt_tester, generator):
    with pytest.raises(NoReviewsError):
        await prompt_tester.test_prompt("{{reviews}}", therapist_id=42)
    assert generator.calls == []
