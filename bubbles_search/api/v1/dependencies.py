"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, caller privilege and the search
use cases. Routes depend only on these dependencies, not on infra directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from bubbles_search.application.interfaces.services import IContentSource
from bubbles_search.application.services.content_sources import build_content_sources
from bubbles_search.application.use_cases.search import (
    DEFAULT_SEARCH_TYPES,
    SearchService,
    SearchState,
)
from bubbles_search.application.use_cases.typeahead import TypeaheadService
from bubbles_search.core.config import get_settings
from bubbles_search.domain.exceptions import SearchException
from bubbles_search.infrastructure.persistence.database import get_db_optional
from bubbles_search.infrastructure.persistence.repositories import (
    CommentRepository,
    PostRepository,
    ReportRepository,
    UserRepository,
)
from bubbles_search.infrastructure.security.jwt import is_privileged_token

_http_bearer = HTTPBearer(auto_error=False)


async def get_post_repo(
    db: Annotated[AsyncSession | None, Depends(get_db_optional)],
) -> PostRepository:
    """Post repository (stories and pages)."""
    return PostRepository(db)


async def get_comment_repo(
    db: Annotated[AsyncSession | None, Depends(get_db_optional)],
) -> CommentRepository:
    """Comment repository."""
    return CommentRepository(db)


async def get_user_repo(
    db: Annotated[AsyncSession | None, Depends(get_db_optional)],
) -> UserRepository:
    """Account repository (privileged source)."""
    return UserRepository(db)


async def get_report_repo(
    db: Annotated[AsyncSession | None, Depends(get_db_optional)],
) -> ReportRepository:
    """Moderation report repository (privileged source)."""
    return ReportRepository(db)


def get_search_state(request: Request) -> SearchState:
    """Process-wide cache and trending tracker created by the lifespan."""
    state = getattr(request.app.state, "search_state", None)
    if state is None:
        raise SearchException(
            "Search state is not initialized", error_code="SERVICE_UNAVAILABLE"
        )
    return state


async def get_caller_is_privileged(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> bool:
    """True when the bearer token carries is_admin; anything else is unprivileged."""
    if not credentials:
        return False
    return is_privileged_token(credentials.credentials)


async def get_content_sources(
    post_repo: Annotated[PostRepository, Depends(get_post_repo)],
    comment_repo: Annotated[CommentRepository, Depends(get_comment_repo)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
    report_repo: Annotated[ReportRepository, Depends(get_report_repo)],
) -> dict[str, IContentSource]:
    """Source registry for this request (sources share the request's session)."""
    return build_content_sources(post_repo, comment_repo, user_repo, report_repo)


async def get_search_service(
    sources: Annotated[dict[str, IContentSource], Depends(get_content_sources)],
    state: Annotated[SearchState, Depends(get_search_state)],
) -> SearchService:
    """Federated search use case."""
    settings = get_settings()
    default_types = tuple(
        t.strip() for t in settings.search_default_types.split(",") if t.strip()
    )
    return SearchService(
        sources,
        state,
        source_timeout_seconds=settings.search_source_timeout_seconds,
        default_types=default_types or DEFAULT_SEARCH_TYPES,
    )


async def get_typeahead_service(
    post_repo: Annotated[PostRepository, Depends(get_post_repo)],
) -> TypeaheadService:
    """Typeahead use case (title-first story suggestions)."""
    return TypeaheadService(post_repo)
