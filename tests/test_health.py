"""Smoke tests for health and app wiring."""

import pytest
from httpx import AsyncClient

from bubbles_search.core.config import get_settings


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data.get("status") == "ok"


async def test_readiness_without_database(client: AsyncClient) -> None:
    """Without DATABASE_URL the service is ready and reports the database as not configured."""
    if get_settings().database_url:
        pytest.skip("DATABASE_URL is set")
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "not_configured"}


async def test_search_works_without_database(client: AsyncClient) -> None:
    """Reference pages answer even when storage-backed sources cannot."""
    if get_settings().database_url:
        pytest.skip("DATABASE_URL is set")
    response = await client.get("/api/v1/search", params={"q": "privacy"})
    assert response.status_code == 200
    body = response.json()
    assert body["meta"]["degraded"] is True
    assert any(r["url"] == "/legal/privacy" for r in body["results"])


async def test_unknown_route_returns_json_404(client: AsyncClient) -> None:
    response = await client.get("/api/v1/nope")
    assert response.status_code == 404
    assert response.json()["error"] == "HTTP_ERROR"
