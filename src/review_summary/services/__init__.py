"""Service layer for business logic.

This layer contains the core business logic and orchestration.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .prompt_config_service import PromptConfigService
from .prompt_test_service import PromptTestService
from .review_aggregator import ReviewAggregator
from .single_flight import KeyedLock
from .summary_cache_service import SummaryCacheService
from .summary_service import ENTITY_TYPE, SummaryService, build_messages

__all__ = [
    "ENTITY_TYPE",
    "KeyedLock",
    "PromptConfigService",
    "PromptTestService",
    "ReviewAggregator",
    "SummaryCacheService",
    "SummaryService",
    "build_messages",
]
