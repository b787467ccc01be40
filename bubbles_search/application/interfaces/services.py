"""Service interfaces (ports) for the application layer.

Protocols define contracts for content sources and the result cache (DIP).
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from bubbles_search.application.dtos.search import SearchableDocument
    from bubbles_search.domain.enums import ContentCategory, VisibilityScope


class IContentSource(Protocol):
    """One content category's translation layer into SearchableDocument.

    Sources never match terms; matching is centralized in the term matcher
    so every category is matched with identical semantics.
    """

    name: str
    category: ContentCategory
    visibility: VisibilityScope

    async def fetch_candidates(
        self,
        date_from: datetime | None = None,
        category_filter: str | None = None,
    ) -> list[SearchableDocument]:
        """Return the (optionally date-filtered) candidate set."""


class IResultCache(Protocol):
    """Protocol for the search result cache (in-memory or Redis)."""

    def is_available(self) -> bool:
        """Return True if cache is usable."""

    async def get(self, key: str) -> Any:
        """Return cached value or None when absent or expired."""

    async def set(self, key: str, value: Any, ttl: int = 300) -> bool:
        """Store value with TTL in seconds. Returns True on success."""
