from typing import Annotated, Any

from fastapi import Depends, FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware

from review_summary.config import settings
from review_summary.dto import (
    ClearCacheResponse,
    HealthCheckResponse,
    PromptConfigResponse,
    ReviewApprovalRequest,
    ReviewResponse,
    ReviewSummaryResponse,
    SubmitReviewRequest,
    TestPromptRequest,
    TestPromptResponse,
    UpdatePromptConfigRequest,
    UpdatePromptConfigResponse,
)

from review_summary.api.dependencies import AdminHandlerDep, ReviewStoreDep, SummaryHandlerDep, lifespan, require_admin

app = FastAPI(
    title="Review Summary API",
    description="Cached AI summaries of therapist reviews",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

AdminOnly = [Depends(require_admin)]


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Review Summary API",
        "version": "0.1.0",
        "description": "Cached AI summaries of therapist reviews",
        "endpoints": {
            "summary": "/therapists/{therapist_id}/review-summary",
            "admin": "/admin",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health", response_model=HealthCheckResponse)
async def health(review_store: ReviewStoreDep) -> HealthCheckResponse:
    """Health check endpoint."""
    healthy = review_store is not None and review_store.health_check()
    return HealthCheckResponse(status="healthy" if healthy else "unhealthy", store_healthy=healthy)


@app.get("/therapists/{therapist_id}/review-summary", response_model=ReviewSummaryResponse)
async def get_review_summary(
    therapist_id: int,
    handler: SummaryHandlerDep,
    force_refresh: Annotated[bool, Query(alias="forceRefresh")] = False,
) -> ReviewSummaryResponse:
    """Get the cached or freshly generated summary of a therapist's reviews."""
    return await handler.get_review_summary(therapist_id, force_refresh=force_refresh)


@app.post("/therapists/{therapist_id}/reviews", response_model=ReviewResponse, status_code=201)
async def submit_review(
    therapist_id: int,
    request: SubmitReviewRequest,
    handler: SummaryHandlerDep,
) -> ReviewResponse:
    """Submit a review; it is hidden until an administrator approves it."""
    return await handler.submit_review(therapist_id, request)


@app.get("/admin/prompts/{name}", response_model=PromptConfigResponse, dependencies=AdminOnly)
async def get_prompt_config(name: str, handler: AdminHandlerDep) -> PromptConfigResponse:
    """Get a prompt configuration, or the built-in default if none is stored."""
    return await handler.get_prompt_config(name)


@app.put("/admin/prompts/{name}", response_model=UpdatePromptConfigResponse, dependencies=AdminOnly)
async def update_prompt_config(
    name: str,
    request: UpdatePromptConfigRequest,
    handler: AdminHandlerDep,
) -> UpdatePromptConfigResponse:
    """Create or overwrite a prompt configuration."""
    return await handler.update_prompt_config(name, request)


@app.post("/admin/prompts/test", response_model=TestPromptResponse, dependencies=AdminOnly)
async def test_prompt(request: TestPromptRequest, handler: AdminHandlerDep) -> TestPromptResponse:
    """Run a candidate prompt against one therapist's reviews without caching."""
    return await handler.test_prompt(request)


@app.delete(
    "/admin/therapists/{therapist_id}/summary-cache",
    response_model=ClearCacheResponse,
    dependencies=AdminOnly,
)
async def clear_cache(therapist_id: int, handler: AdminHandlerDep) -> ClearCacheResponse:
    """Delete every cached summary for a therapist."""
    return await handler.clear_cache(therapist_id)


@app.patch("/admin/reviews/{review_id}", response_model=ReviewResponse, dependencies=AdminOnly)
async def set_review_approval(
    review_id: int,
    request: ReviewApprovalRequest,
    handler: AdminHandlerDep,
) -> ReviewResponse:
    """Approve or reject a submitted review."""
    return await handler.set_review_approval(review_id, request)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "review_summary.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
