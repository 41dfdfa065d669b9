"""Request DTOs for API endpoints."""

from pydantic import Field

from .base import ApiModel


class UpdatePromptConfigRequest(ApiModel):
    """Request DTO for creating or updating a prompt configuration."""

    prompt_template: str = Field(..., description="Template containing the {{reviews}} placeholder", min_length=1)
    system_message: str | None = Field(None, description="Optional system message")
    description: str | None = Field(None, description="Optional human-readable description")


class TestPromptRequest(ApiModel):
    """Request DTO for testing a candidate prompt against one therapist."""

    prompt_template: str = Field(..., description="Candidate template", min_length=1)
    system_message: str | None = Field(None, description="Optional system message override")
    therapist_id: int = Field(..., description="Therapist whose reviews are used", ge=1)


class SubmitReviewRequest(ApiModel):
    """Request DTO for a public review submission."""

    rating: int = Field(..., description="Star rating", ge=1, le=5)
    review_text: str = Field("", description="Free-text review body", max_length=5000)
    reviewer_name: str | None = Field(None, description="Optional display name", max_length=100)


class ReviewApprovalRequest(ApiModel):
    """Request DTO for approving or rejecting a review."""

    is_approved: bool = Field(..., description="True to approve, False to reject")
