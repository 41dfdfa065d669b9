"""
Tests for the review summary API.
"""

import pytest
from fastapi.testclient import TestClient

from conftest import (
    FakeClock,
    FakeGenerator,
    InMemoryPromptConfigStore,
    InMemoryReviewStore,
    InMemorySummaryCacheStore,
    add_approved,
)
from review_summary.api.app import app
from review_summary.api.dependencies import (
    build_handlers,
    get_admin_handler,
    get_admin_token,
    get_review_store,
    get_summary_handler,
)
from review_summary.exceptions import GenerationError

ADMIN = {"X-Admin-Token": "letmein"}


@pytest.fixture
def stores():
    clock = FakeClock()
    return {
        "clock": clock,
        "reviews": InMemoryReviewStore(clock),
        "prompts": InMemoryPromptConfigStore(),
        "cache": InMemorySummaryCacheStore(),
        "generator": FakeGenerator("X"),
    }


@pytest.fixture
def client(stores):
    """Create a test client wired to in-memory stores."""
    summary_handler, admin_handler = build_handlers(
        review_store=stores["reviews"],
        prompt_store=stores["prompts"],
        cache_store=stores["cache"],
        generator=stores["generator"],
    )
    app.dependency_overrides[get_summary_handler] = lambda: summary_handler
    app.dependency_overrides[get_admin_handler] = lambda: admin_handler
    app.dependency_overrides[get_review_store] = lambda: stores["reviews"]
    app.dependency_overrides[get_admin_token] = lambda: "letmein"
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def therapist_42(stores):
    add_approved(stores["reviews"], stores["clock"], 42, 4, "Good")
    add_approved(stores["reviews"], stores["clock"], 42, 5, "Great")


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["name"] == "Review Summary API"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "storeHealthy": True}


def test_summary_without_reviews(client):
    response = client.get("/therapists/42/review-summary")
    assert response.status_code == 200
    assert response.json() == {"summary": None, "reviewCount": 0, "cached": False, "cachedAt": None}


def test_summary_generate_then_cached(client, therapist_42):
    first = client.get("/therapists/42/review-summary").json()
    second = client.get("/therapists/42/review-summary").json()

    assert (first["summary"], first["reviewCount"], first["cached"]) == ("X", 2, False)
    assert (second["summary"], second["cached"]) == ("X", True)
    assert second["cachedAt"] is not None


def test_force_refresh_query_param(client, stores, therapist_42):
    client.get("/therapists/42/review-summary")
    response = client.get("/therapists/42/review-summary", params={"forceRefresh": "true"})

    assert response.json()["cached"] is False
    assert len(stores["generator"].calls) == 2


def test_generation_failure_is_bad_gateway(client, stores, therapist_42):
    stores["generator"].error = GenerationError("provider timeout")

    response = client.get("/therapists/42/review-summary")

    assert response.status_code == 502
    assert "provider timeout" in response.json()["detail"]


@pytest.mark.parametrize(
    "method, path, body",
    [
        ("GET", "/admin/prompts/review_summary", None),
        ("PUT", "/admin/prompts/review_summary", {"promptTemplate": "T {{reviews}}"}),
        ("POST", "/admin/prompts/test", {"promptTemplate": "T {{reviews}}", "therapistId": 42}),
        ("DELETE", "/admin/therapists/42/summary-cache", None),
        ("PATCH", "/admin/reviews/1", {"isApproved": True}),
    ],
)
@pytest.mark.parametrize("headers", [{}, {"X-Admin-Token": "wrong"}])
def test_admin_routes_require_token(client, stores, method, path, body, headers):
    response = client.request(method, path, json=body, headers=headers)

    assert response.status_code == 401
    assert stores["prompts"].rows == {}
    assert stores["generator"].calls == []


def test_admin_routes_disabled_without_configured_token(client):
    app.dependency_overrides[get_admin_token] = lambda: None

    response = client.get("/admin/prompts/review_summary", headers=ADMIN)

    assert response.status_code == 403


def test_get_prompt_config_default(client):
    response = client.get("/admin/prompts/review_summary", headers=ADMIN)

    data = response.json()
    assert response.status_code == 200
    assert data["isDefault"] is True
    assert "{{reviews}}" in data["promptTemplate"]


def test_update_prompt_config_created_then_updated(client):
    body = {"promptTemplate": "Summarize: {{reviews}}", "systemMessage": "Be brief."}

    first = client.put("/admin/prompts/review_summary", json=body, headers=ADMIN)
    second = client.put("/admin/prompts/review_summary", json=body, headers=ADMIN)
    config = client.get("/admin/prompts/review_summary", headers=ADMIN).json()

    assert first.json() == {"success": True, "action": "created"}
    assert second.json() == {"success": True, "action": "updated"}
    assert config["promptTemplate"] == "Summarize: {{reviews}}"
    assert config["isDefault"] is False


def test_update_prompt_config_rejects_empty_template(client):
    response = client.put("/admin/prompts/review_summary", json={"promptTemplate": ""}, headers=ADMIN)
    assert response.status_code == 422


def test_prompt_test_endpoint(client, stores, therapist_42):
    response = client.post(
        "/admin/prompts/test",
        json={"promptTemplate": "Summarize: {{reviews}}", "therapistId": 42},
        headers=ADMIN,
    )

    data = response.json()
    assert response.status_code == 200
    assert data["summary"] == "X"
    assert data["reviewCount"] == 2
    assert data["inputPreview"].endswith("...")
    assert stores["cache"].rows == {}


def test_prompt_test_without_reviews_is_not_found(client):
    response = client.post(
        "/admin/prompts/test",
        json={"promptTemplate": "{{reviews}}", "therapistId": 42},
        headers=ADMIN,
    )
    assert response.status_code == 404


def test_clear_cache_endpoint(client, stores, therapist_42):
    client.get("/therapists/42/review-summary")

    response = client.delete("/admin/therapists/42/summary-cache", headers=ADMIN)

    assert response.json() == {"success": True, "deletedCount": 1}
    assert client.get("/therapists/42/review-summary").json()["cached"] is False


def test_submit_and_approve_review(client):
    submitted = client.post("/therapists/42/reviews", json={"rating": 5, "reviewText": "Kind and patient"})
    assert submitted.status_code == 201
    review = submitted.json()
    assert review["isApproved"] is False
    assert client.get("/therapists/42/review-summary").json()["reviewCount"] == 0

    approved = client.patch(f"/admin/reviews/{review['id']}", json={"isApproved": True}, headers=ADMIN)

    assert approved.json()["isApproved"] is True
    assert client.get("/therapists/42/review-summary").json()["reviewCount"] == 1


def test_submit_review_validates_rating(client):
    response = client.post("/therapists/42/reviews", json={"rating": 6, "reviewText": "Too good"})
    assert response.status_code == 422


def test_approve_unknown_review(client):
    response = client.patch("/admin/reviews/999", json={"isApproved": True}, headers=ADMIN)
    assert response.status_code == 404
