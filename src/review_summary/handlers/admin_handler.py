"""HTTP handlers for admin-only operations.

Authorization is enforced by the route dependency before these run.
"""

from review_summary.dto import (
    ClearCacheResponse,
    PromptConfigResponse,
    ReviewApprovalRequest,
    ReviewResponse,
    TestPromptRequest,
    TestPromptResponse,
    UpdatePromptConfigRequest,
    UpdatePromptConfigResponse,
)
from review_summary.exceptions import ReviewSummaryError
from review_summary.services import (
    PromptConfigService,
    PromptTestService,
    ReviewAggregator,
    SummaryService,
)

from .errors import to_http_exception
from .summary_handler import review_to_dto


class AdminHandler:
    """HTTP handlers for prompt management, prompt testing, cache and moderation."""

    def __init__(
        self,
        prompt_configs: PromptConfigService,
        prompt_tester: PromptTestService,
        summary_service: SummaryService,
        aggregator: ReviewAggregator,
    ) -> None:
        self._prompt_configs = prompt_configs
        self._prompt_tester = prompt_tester
        self._summaries = summary_service
        self._aggregator = aggregator

    async def get_prompt_config(self, name: str) -> PromptConfigResponse:
        """Handle GET /admin/prompts/{name} requests."""
        try:
            config = self._prompt_configs.get(name)
        except ReviewSummaryError as e:
            raise to_http_exception(e, "Failed to get prompt config") from e

        return PromptConfigResponse(
            name=config.name,
            description=config.description,
            prompt_template=config.prompt_template,
            system_message=config.system_message,
            is_active=config.is_active,
            is_default=config.is_default,
            updated_at=config.updated_at,
        )

    async def update_prompt_config(self, name: str, request: UpdatePromptConfigRequest) -> UpdatePromptConfigResponse:
        """Handle PUT /admin/prompts/{name} requests."""
        try:
            action = self._prompt_configs.upsert(
                name=name,
                prompt_template=request.prompt_template,
                system_message=request.system_message,
                description=request.description,
            )
        except ReviewSummaryError as e:
            raise to_http_exception(e, "Failed to update prompt config") from e

        return UpdatePromptConfigResponse(success=True, action=action)

    async def test_prompt(self, request: TestPromptRequest) -> TestPromptResponse:
        """Handle POST /admin/prompts/test requests."""
        try:
            result = await self._prompt_tester.test_prompt(
                prompt_template=request.prompt_template,
                therapist_id=request.therapist_id,
                system_message=request.system_message,
            )
        except ReviewSummaryError as e:
            raise to_http_exception(e, "Failed to test prompt") from e

        return TestPromptResponse(
            summary=result.summary,
            review_count=result.review_count,
            input_preview=result.input_preview,
        )

    async def clear_cache(self, therapist_id: int) -> ClearCacheResponse:
        """Handle DELETE /admin/therapists/{therapist_id}/summary-cache requests."""
        try:
            deleted = self._summaries.clear_cache(therapist_id)
        except ReviewSummaryError as e:
            raise to_http_exception(e, "Failed to clear cache") from e

        return ClearCacheResponse(success=True, deleted_count=deleted)

    async def set_review_approval(self, review_id: int, request: ReviewApprovalRequest) -> ReviewResponse:
        """Handle PATCH /admin/reviews/{review_id} requests."""
        try:
            review = self._aggregator.set_approval(review_id, request.is_approved)
        except ReviewSummaryError as e:
            raise to_http_exception(e, "Failed to update review") from e

        return review_to_dto(review)
