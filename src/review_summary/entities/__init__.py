"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .prompt_config import (
    DEFAULT_REVIEW_SUMMARY_PROMPT,
    DEFAULT_SYSTEM_MESSAGE,
    REVIEWS_PLACEHOLDER,
    PromptConfigEntity,
)
from .review import MAX_RATING, MIN_RATING, RatingStatsEntity, ReviewEntity
from .summary import PromptTestResultEntity, ReviewSummaryEntity
from .summary_cache_entry import SummaryCacheEntryEntity

__all__ = [
    "DEFAULT_REVIEW_SUMMARY_PROMPT",
    "DEFAULT_SYSTEM_MESSAGE",
    "MAX_RATING",
    "MIN_RATING",
    "PromptConfigEntity",
    "PromptTestResultEntity",
    "RatingStatsEntity",
    "REVIEWS_PLACEHOLDER",
    "ReviewEntity",
    "ReviewSummaryEntity",
    "SummaryCacheEntryEntity",
]
