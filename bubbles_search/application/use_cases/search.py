"""Federated search use case (query orchestrator).

Validates and normalizes the request, serves repeated queries from the
result cache, otherwise reads every permitted content source, matches,
ranks and paginates, then records the query as trending and, for empty
results, looks up a did-you-mean suggestion.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any

from bubbles_search.application.dtos.search import SearchQuery, SearchResult
from bubbles_search.application.services.content_sources import canonical_type_name
from bubbles_search.application.services.ranking import paginate, rank_results
from bubbles_search.application.services.term_matcher import (
    MAX_SENTENCES_PER_TERM,
    to_search_result,
)
from bubbles_search.application.services.trending import TrendingTracker
from bubbles_search.core.constants import (
    DEFAULT_RESULT_LIMIT,
    MAX_QUERY_LENGTH,
    MAX_RESULT_LIMIT,
    MIN_TERM_LENGTH,
)
from bubbles_search.domain.enums import VisibilityScope
from bubbles_search.domain.exceptions import (
    InvalidQueryException,
    SourceUnavailableException,
    SqlNotConfiguredException,
)
from bubbles_search.shared.telemetry.tracing import (
    add_span_attributes,
    add_span_event,
    traced,
)

if TYPE_CHECKING:
    from bubbles_search.application.dtos.search import SearchableDocument
    from bubbles_search.application.interfaces.services import (
        IContentSource,
        IResultCache,
    )

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_TYPES: tuple[str, ...] = ("posts", "pages", "comments", "legal", "settings")
DEFAULT_CACHE_TTL_SECONDS = 300


@dataclass
class SearchState:
    """Process-wide search state: result cache and trending tracker.

    Created empty at startup and discarded at shutdown (see core.lifespan).
    """

    cache: IResultCache | None
    trending: TrendingTracker
    cache_ttl_seconds: int = DEFAULT_CACHE_TTL_SECONDS


def extract_terms(query: str) -> tuple[str, ...]:
    """Lower-cased whitespace tokens of at least MIN_TERM_LENGTH chars, de-duplicated in order."""
    seen: dict[str, None] = {}
    for token in query.lower().split():
        if len(token) >= MIN_TERM_LENGTH:
            seen.setdefault(token, None)
    return tuple(seen)


def clamp_limit(limit: int | None, default: int = DEFAULT_RESULT_LIMIT, maximum: int = MAX_RESULT_LIMIT) -> int:
    """Clamp limit into [1, maximum]; None means default."""
    if limit is None:
        return default
    return min(max(limit, 1), maximum)


def clamp_page(page: int | None) -> int:
    """Clamp page into [1, inf); None means 1."""
    if page is None:
        return 1
    return max(page, 1)


class SearchService:
    """Aggregates all permitted content sources into one ranked, paginated result set.

    Sources are request-scoped (they hold a DB session); cache and trending
    tracker come from the process-wide SearchState.
    """

    def __init__(
        self,
        sources: dict[str, IContentSource],
        state: SearchState,
        source_timeout_seconds: float | None = None,
        default_types: tuple[str, ...] = DEFAULT_SEARCH_TYPES,
    ) -> None:
        self.sources = sources
        self.state = state
        self.source_timeout_seconds = source_timeout_seconds
        self.default_types = default_types

    def build_query(
        self,
        raw_query: str | None,
        requested_types: list[str] | tuple[str, ...] | None = None,
        limit: int | None = None,
        page: int | None = None,
        date_from: datetime | None = None,
        category: str | None = None,
        caller_is_privileged: bool = False,
    ) -> SearchQuery:
        """Validate and normalize a request.

        Raises:
            InvalidQueryException: Empty query, longer than MAX_QUERY_LENGTH chars,
                or no term of MIN_TERM_LENGTH chars.
        """
        if raw_query is None or not raw_query.strip():
            raise InvalidQueryException("Search query is required")
        if len(raw_query.strip()) > MAX_QUERY_LENGTH:
            raise InvalidQueryException(
                f"Search query must be at most {MAX_QUERY_LENGTH} characters",
                max_query_length=MAX_QUERY_LENGTH,
            )
        query = raw_query.strip().lower()
        terms = extract_terms(query)
        if not terms:
            raise InvalidQueryException(
                f"Search query must contain at least one term with {MIN_TERM_LENGTH} or more characters",
                query=raw_query,
                min_term_length=MIN_TERM_LENGTH,
            )
        types = tuple(t.strip() for t in (requested_types or ()) if t and t.strip())
        return SearchQuery(
            query=query,
            terms=terms,
            types=types or self.default_types,
            limit=clamp_limit(limit),
            page=clamp_page(page),
            date_from=date_from,
            category=category.strip() if category and category.strip() else None,
            caller_is_privileged=caller_is_privileged,
        )

    def select_sources(self, query: SearchQuery) -> list[IContentSource]:
        """Registered sources for the requested types, in request order.

        Unknown type names are ignored. Privileged sources are skipped unless
        the caller is privileged; this service never elevates privilege.
        """
        selected: list[IContentSource] = []
        seen: set[str] = set()
        for name in query.types:
            key = canonical_type_name(name)
            if key in seen:
                continue
            seen.add(key)
            source = self.sources.get(key)
            if source is None:
                logger.debug("Ignoring unknown search type: %s", name)
                continue
            if source.visibility is VisibilityScope.PRIVILEGED and not query.caller_is_privileged:
                continue
            selected.append(source)
        return selected

    @traced("search.execute")
    async def search(
        self,
        raw_query: str | None,
        requested_types: list[str] | tuple[str, ...] | None = None,
        limit: int | None = None,
        page: int | None = None,
        date_from: datetime | None = None,
        category: str | None = None,
        caller_is_privileged: bool = False,
    ) -> dict[str, Any]:
        """Run a federated search and return the response envelope ``{results, meta}``.

        Raises:
            InvalidQueryException: Query fails validation.
            SourceUnavailableException: Every invoked source failed.
        """
        query = self.build_query(
            raw_query,
            requested_types=requested_types,
            limit=limit,
            page=page,
            date_from=date_from,
            category=category,
            caller_is_privileged=caller_is_privileged,
        )
        key = query.cache_key()
        cache = self.state.cache
        if cache is not None:
            cached = await cache.get(key)
            if cached is not None:
                add_span_attributes(**{"search.cache_hit": True})
                return cached

        logger.info("Searching for %r with terms %s (types=%s)", query.query, list(query.terms), list(query.types))
        results, failed, invoked = await self._collect(query)
        if invoked and len(failed) == invoked:
            raise SourceUnavailableException(failed)

        ranked = rank_results(results)
        page_items, total, pages = paginate(ranked, query.page, query.limit)

        self.state.trending.record(query.query)
        did_you_mean = self._did_you_mean(query.query) if total == 0 else None

        payload: dict[str, Any] = {
            "results": [r.to_dict() for r in page_items],
            "meta": {
                "query": query.query,
                "total": total,
                "page": query.page,
                "pages": pages,
                "limit": query.limit,
                "types": list(query.types),
                "from": query.date_from.isoformat() if query.date_from else None,
                "category": query.category,
                "didYouMean": did_you_mean,
                "degraded": bool(failed),
            },
        }
        # A partial page is not cached so a transient source failure does not outlive the request.
        if cache is not None and not failed:
            await cache.set(key, payload, ttl=self.state.cache_ttl_seconds)

        add_span_attributes(**{"search.cache_hit": False, "search.total": total})
        logger.info(
            "Found %s results for %r (page %s/%s)", total, query.query, query.page, pages
        )
        return payload

    async def _collect(self, query: SearchQuery) -> tuple[list[SearchResult], list[str], int]:
        """Fetch and match every selected source.

        Sources share the request's DB session, which does not allow concurrent
        operations, so they are awaited in turn, each under its own timeout.

        Returns:
            (matched results, names of failed sources, number of sources invoked)
        """
        selected = self.select_sources(query)
        results: list[SearchResult] = []
        failed: list[str] = []
        for source in selected:
            documents = await self._fetch(source, query)
            if documents is None:
                failed.append(source.name)
                add_span_event("search.source_failed", {"source": source.name})
                continue
            max_sentences = getattr(source, "max_sentences", MAX_SENTENCES_PER_TERM)
            for document in documents:
                if document.visibility is VisibilityScope.PRIVILEGED and not query.caller_is_privileged:
                    continue
                result = to_search_result(document, query.terms, max_sentences=max_sentences)
                if result is not None:
                    results.append(result)
        return results, failed, len(selected)

    async def _fetch(self, source: IContentSource, query: SearchQuery) -> list[SearchableDocument] | None:
        """Return the source's candidates, or None if it failed or timed out."""
        try:
            return await asyncio.wait_for(
                source.fetch_candidates(
                    date_from=query.date_from,
                    category_filter=query.category,
                ),
                timeout=self.source_timeout_seconds,
            )
        except TimeoutError:
            logger.warning(
                "Search source %s timed out after %ss; excluding it",
                source.name,
                self.source_timeout_seconds,
            )
        except SqlNotConfiguredException:
            logger.warning("Search source %s needs a database; excluding it", source.name)
        except Exception:
            logger.exception("Search source %s unavailable; excluding it", source.name)
        return None

    def _did_you_mean(self, query: str) -> str | None:
        try:
            return self.state.trending.suggest(query)
        except Exception as e:
            logger.debug("Did-you-mean lookup failed for %r: %s", query, e)
            return None
