"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (search state, result cache,
telemetry, DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from bubbles_search.application.services.trending import TrendingTracker
from bubbles_search.application.use_cases.search import SearchState
from bubbles_search.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: result cache (memory, or Redis when configured), trending
    tracker, telemetry (if enabled). Shutdown order: cache disconnect,
    telemetry shutdown, SQL engine dispose. Search state is created empty
    here and discarded on shutdown; nothing is persisted.
    """
    settings = get_settings()

    # ---- Startup ----
    if settings.search_cache_backend == "redis":
        from bubbles_search.infrastructure.cache.redis_cache import CacheService

        cache = CacheService()
        await cache.connect()
    else:
        from bubbles_search.infrastructure.cache.memory_cache import InMemoryTTLCache

        cache = InMemoryTTLCache(
            default_ttl=settings.search_cache_ttl_seconds,
            max_entries=settings.search_cache_max_entries,
        )
    app.state.search_state = SearchState(
        cache=cache,
        trending=TrendingTracker(capacity=settings.search_trending_capacity),
        cache_ttl_seconds=settings.search_cache_ttl_seconds,
    )
    logger.info("Search state ready (cache backend: %s)", settings.search_cache_backend)

    app.state.telemetry = None
    if settings.telemetry_enabled:
        from bubbles_search.infrastructure.persistence.database import get_engine
        from bubbles_search.shared.telemetry.telemetry import TelemetryConfig

        telemetry = TelemetryConfig.from_settings(settings)
        if telemetry.setup() is not None:
            telemetry.instrument(app, engine=get_engine())
            app.state.telemetry = telemetry

    yield

    # ---- Shutdown ----
    state = getattr(app.state, "search_state", None)
    if state is not None:
        disconnect = getattr(state.cache, "disconnect", None)
        if disconnect is not None:
            await disconnect()
            logger.info("Cache disconnected")
        app.state.search_state = None

    telemetry = getattr(app.state, "telemetry", None)
    if telemetry is not None:
        telemetry.shutdown()
        app.state.telemetry = None

    from bubbles_search.infrastructure.persistence.database import dispose_engine

    await dispose_engine()
