"""Search API: federated search, typeahead suggestions and trending queries."""

import logging
import re
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from bubbles_search.api.v1.dependencies import (
    get_caller_is_privileged,
    get_search_service,
    get_search_state,
    get_typeahead_service,
)
from bubbles_search.application.use_cases.search import SearchService, SearchState
from bubbles_search.application.use_cases.typeahead import TypeaheadService
from bubbles_search.core.limiter import limit_search
from bubbles_search.middleware.request_id import get_request_id
from bubbles_search.schemas.search import (
    SearchResponse,
    SuggestResponse,
    TrendingResponse,
)
from bubbles_search.shared.utils.datetime import parse_since

logger = logging.getLogger(__name__)

router = APIRouter()

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_int_param(value: str | None) -> int | None:
    """Leading integer of a query value ("20", " 7abc" -> 7); None when there is none.

    Numeric parameters are lenient: garbage falls back to the default instead
    of failing the request.
    """
    if value is None:
        return None
    match = _LEADING_INT_RE.match(value)
    return int(match.group(1)) if match else None


def parse_types_param(value: str | None) -> list[str]:
    """Comma separated type names, trimmed, empties dropped."""
    if not value:
        return []
    return [t.strip() for t in value.split(",") if t.strip()]


@router.get("", response_model=SearchResponse)
@limit_search
async def search(
    request: Request,
    search_svc: Annotated[SearchService, Depends(get_search_service)],
    caller_is_privileged: Annotated[bool, Depends(get_caller_is_privileged)],
    q: str | None = Query(None, description="Search query"),
    types: str | None = Query(None, description="Comma separated content types"),
    limit: str | None = Query(None, description="Results per page (1-50, default 20)"),
    page: str | None = Query(None, description="1-based page number"),
    date_from: str | None = Query(
        None, alias="from", description="Day count (e.g. 7) or ISO-8601 date"
    ),
    category: str | None = Query(None, description="Story theme category"),
) -> Any:
    """Search every permitted content source; results ranked by match count then recency."""
    return await search_svc.search(
        q,
        requested_types=parse_types_param(types),
        limit=parse_int_param(limit),
        page=parse_int_param(page),
        date_from=parse_since(date_from),
        category=category,
        caller_is_privileged=caller_is_privileged,
    )


@router.get("/suggest", response_model=SuggestResponse)
@limit_search
async def suggest(
    request: Request,
    typeahead: Annotated[TypeaheadService, Depends(get_typeahead_service)],
    q: str | None = Query(None, description="Partial query"),
    limit: str | None = Query(None, description="Max suggestions (1-20, default 10)"),
) -> Any:
    """Typeahead: stories whose title (then body) contains the partial query."""
    try:
        suggestions = await typeahead.suggest(q, limit=parse_int_param(limit))
    except Exception:
        logger.exception(
            "Typeahead suggestion failed for %r (request %s)", q, get_request_id(request)
        )
        return JSONResponse(status_code=500, content={"suggestions": []})
    return {"suggestions": [s.to_dict() for s in suggestions]}


@router.get("/trending", response_model=TrendingResponse)
async def trending(
    state: Annotated[SearchState, Depends(get_search_state)],
    limit: int = Query(10, ge=1, le=50),
) -> Any:
    """Most frequently executed queries since the service started."""
    return {
        "trending": [
            {"query": t.query, "count": t.count} for t in state.trending.top(limit)
        ]
    }
