"""Application DTOs (no ORM dependency)."""

from bubbles_search.application.dtos.content import (
    CommentRecord,
    PostRecord,
    ReportRecord,
    UserRecord,
)
from bubbles_search.application.dtos.search import (
    MatchRecord,
    SearchableDocument,
    SearchQuery,
    SearchResult,
    Suggestion,
    TrendingQuery,
)

__all__ = [
    "CommentRecord",
    "MatchRecord",
    "PostRecord",
    "ReportRecord",
    "SearchQuery",
    "SearchResult",
    "SearchableDocument",
    "Suggestion",
    "TrendingQuery",
    "UserRecord",
]
