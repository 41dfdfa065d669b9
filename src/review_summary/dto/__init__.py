"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import (
    ReviewApprovalRequest,
    SubmitReviewRequest,
    TestPromptRequest,
    UpdatePromptConfigRequest,
)
from .responses import (
    ClearCacheResponse,
    HealthCheckResponse,
    PromptConfigResponse,
    ReviewResponse,
    ReviewSummaryResponse,
    TestPromptResponse,
    UpdatePromptConfigResponse,
)

__all__ = [
    "ReviewApprovalRequest",
    "SubmitReviewRequest",
    "TestPromptRequest",
    "UpdatePromptConfigRequest",
    "ClearCacheResponse",
    "HealthCheckResponse",
    "PromptConfigResponse",
    "ReviewResponse",
    "ReviewSummaryResponse",
    "TestPromptResponse",
    "UpdatePromptConfigResponse",
]
