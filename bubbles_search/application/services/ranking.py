"""Relevance ranking and pagination for merged search results.

Ranking is deliberately simple: match count, then recency. No other signal.
"""

from __future__ import annotations

import math
from datetime import UTC, datetime

from bubbles_search.application.dtos.search import SearchResult

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def _created_key(result: SearchResult) -> datetime:
    created = result.document.created_at
    if created is None:
        return _EPOCH
    if created.tzinfo is None:
        return created.replace(tzinfo=UTC)
    return created


def rank_results(results: list[SearchResult]) -> list[SearchResult]:
    """Return results ordered by match count desc, then created_at desc (newest first).

    Missing timestamps sort as the epoch (last among equal match counts).
    Sorting is stable, so fully tied results keep their merge order.
    """
    return sorted(
        results,
        key=lambda r: (r.match_count, _created_key(r)),
        reverse=True,
    )


def total_pages(total: int, limit: int) -> int:
    """Number of pages for total results at limit per page (at least 1)."""
    return max(math.ceil(total / limit), 1)


def paginate(
    results: list[SearchResult], page: int, limit: int
) -> tuple[list[SearchResult], int, int]:
    """Slice ranked results for a 1-based page.

    Returns:
        (page items, total result count, total pages). Pages past the end are empty.
    """
    total = len(results)
    start = (page - 1) * limit
    return results[start : start + limit], total, total_pages(total, limit)
