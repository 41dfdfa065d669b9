"""Response DTOs for API endpoints."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from .base import ApiModel


class ReviewSummaryResponse(ApiModel):
    """Response DTO for a therapist's review summary."""

    summary: str | None = Field(..., description="Summary text, or null when there are no reviews")
    review_count: int = Field(..., description="Number of reviews summarized", ge=0)
    cached: bool = Field(..., description="Whether the summary was served from cache")
    cached_at: datetime | None = Field(None, description="When the cached summary was generated")


class PromptConfigResponse(ApiModel):
    """Response DTO for a prompt configuration."""

    name: str = Field(..., description="Configuration name")
    description: str | None = Field(None, description="Human-readable description")
    prompt_template: str = Field(..., description="Template containing the {{reviews}} placeholder")
    system_message: str | None = Field(None, description="System message")
    is_active: bool = Field(..., description="Whether the configuration is used for generation")
    is_default: bool = Field(False, description="True when no row is stored and the built-in default is shown")
    updated_at: datetime | None = Field(None, description="Last update time")


class UpdatePromptConfigResponse(ApiModel):
    """Response DTO for a prompt configuration upsert."""

    success: bool = Field(..., description="Whether the operation succeeded")
    action: Literal["created", "updated"] = Field(..., description="Whether a row was created or updated")


class TestPromptResponse(ApiModel):
    """Response DTO for a prompt test."""

    summary: str = Field(..., description="Generated text")
    review_count: int = Field(..., description="Number of reviews used", ge=1)
    input_preview: str = Field(..., description="Truncated preview of the rendered reviews")


class ClearCacheResponse(ApiModel):
    """Response DTO for clearing a therapist's summary cache."""

    success: bool = Field(..., description="Whether the operation succeeded")
    deleted_count: int = Field(..., description="Number of cache entries removed", ge=0)


class ReviewResponse(ApiModel):
    """Response DTO for a single review."""

    id: int
    therapist_id: int
    rating: int
    review_text: str
    reviewer_name: str | None = None
    is_approved: bool
    created_at: datetime


class HealthCheckResponse(ApiModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    store_healthy: bool = Field(..., description="Whether the backing store is reachable")
