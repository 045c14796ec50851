"""Health checks, request log context and the 500 boundary."""

import pytest
import structlog
from httpx import ASGITransport, AsyncClient

from cms.api.dependencies.services import get_content_service


async def test_health_reports_ok_with_timestamp(client):
    res = await client.get("/health")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "ok"
    assert body["timestamp"]


async def test_ready_reports_collection_counts(client):
    await client.post("/api/categories", json={"name": "Blog", "color": "#fff", "slug": "blog"})
    res = await client.get("/ready")
    assert res.json() == {
        "status": "ready",
        "collections": {"content": 0, "categories": 1, "media": 0},
    }


class _ExplodingService:
    async def list_content(self, **kwargs):
        raise RuntimeError("secret internal detail")


@pytest.fixture
async def failing_client(app):
    app.dependency_overrides[get_content_service] = lambda: _ExplodingService()
    # The server error middleware re-raises after responding; keep the response
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


async def test_unexpected_error_is_500_without_detail(failing_client):
    res = await failing_client.get("/api/content")
    assert res.status_code == 500
    assert res.json() == {"error": "Internal server error"}
    assert "secret" not in res.text


class _ContextRecordingService:
    def __init__(self):
        self.seen = None

    async def list_content(self, **kwargs):
        self.seen = structlog.contextvars.get_contextvars()
        return []


async def test_request_path_is_bound_to_log_context_and_cleared(app, client):
    service = _ContextRecordingService()
    app.dependency_overrides[get_content_service] = lambda: service

    res = await client.get("/api/content")

    assert res.status_code == 200
    assert service.seen == {"method": "GET", "path": "/api/content"}
    assert structlog.contextvars.get_contextvars() == {}
    app.dependency_overrides.clear()
