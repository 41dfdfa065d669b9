"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (Redis → PostgreSQL, OpenAI → local model, etc.)
- Unit testing with in-memory implementations
- Clear separation of concerns

Usage:
    ```python
    from review_summary.protocols import SummaryCacheStore

    store: SummaryCacheStore = RedisSummaryCacheRepository(client)
    ```
"""

from .prompt_config_store import PromptConfigStore
from .review_store import ReviewStore
from .summary_cache_store import SummaryCacheStore
from .text_generator import TextGenerator

__all__ = [
    "PromptConfigStore",
    "ReviewStore",
    "SummaryCacheStore",
    "TextGenerator",
]
