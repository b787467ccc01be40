"""Pytest configuration and fixtures for bubbles-search.

Uses bubbles_search.main:app for HTTP tests. ASGITransport does not run the
lifespan, so the client fixture enters it explicitly (fresh cache and
trending tracker per test). No database is required.
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient

# Token verification needs a key; set before settings are first loaded.
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-bubbles-search")

from bubbles_search.application.services.trending import TrendingTracker  # noqa: E402
from bubbles_search.application.use_cases.search import SearchState  # noqa: E402
from bubbles_search.core.config import get_settings  # noqa: E402
from bubbles_search.core.lifespan import create_lifespan  # noqa: E402
from bubbles_search.core.limiter import limiter  # noqa: E402
from bubbles_search.infrastructure.cache.memory_cache import InMemoryTTLCache  # noqa: E402
from bubbles_search.main import app  # noqa: E402

get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _reset_rate_limits() -> None:
    """Rate-limit counters are process-wide; start every test with a clean slate."""
    limiter.reset()


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI), lifespan included."""
    async with create_lifespan(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def search_state() -> SearchState:
    """Empty search state (memory cache + trending tracker)."""
    return SearchState(cache=InMemoryTTLCache(), trending=TrendingTracker())
