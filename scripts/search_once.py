"""Run one federated search against the configured database and print the envelope.

Usage:
    python -m scripts.search_once "<query>" [types] [--admin]
types is a comma separated list (e.g. posts,comments). Useful for checking
matching and ranking against real content without starting the server.
"""

import asyncio
import json
import sys

from bubbles_search.application.services.content_sources import build_content_sources
from bubbles_search.application.services.trending import TrendingTracker
from bubbles_search.application.use_cases.search import SearchService, SearchState
from bubbles_search.core.config import get_settings
from bubbles_search.domain.exceptions import SearchException
from bubbles_search.infrastructure.cache.memory_cache import InMemoryTTLCache
from bubbles_search.infrastructure.persistence.database import dispose_engine, get_db_optional
from bubbles_search.infrastructure.persistence.repositories import (
    CommentRepository,
    PostRepository,
    ReportRepository,
    UserRepository,
)
from bubbles_search.shared.telemetry.logging import setup_logging


async def main() -> None:
    """Search once; exit 1 on invalid query or when every source failed."""
    args = [a for a in sys.argv[1:] if a != "--admin"]
    if not args:
        print('Usage: python -m scripts.search_once "<query>" [types] [--admin]', file=sys.stderr)
        sys.exit(1)
    query = args[0]
    types = [t for t in args[1].split(",") if t.strip()] if len(args) > 1 else None
    privileged = "--admin" in sys.argv[1:]

    setup_logging()
    settings = get_settings()
    state = SearchState(
        cache=InMemoryTTLCache(default_ttl=settings.search_cache_ttl_seconds),
        trending=TrendingTracker(capacity=settings.search_trending_capacity),
    )
    try:
        async for session in get_db_optional():
            sources = build_content_sources(
                PostRepository(session),
                CommentRepository(session),
                UserRepository(session),
                ReportRepository(session),
            )
            service = SearchService(
                sources, state, source_timeout_seconds=settings.search_source_timeout_seconds
            )
            try:
                payload = await service.search(
                    query, requested_types=types, caller_is_privileged=privileged
                )
            except SearchException as e:
                print(json.dumps(e.to_dict(), indent=2), file=sys.stderr)
                sys.exit(1)
            print(json.dumps(payload, indent=2))
    finally:
        await dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
