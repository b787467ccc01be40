"""DTOs for federated search (ephemeral, built per request; no dependency on ORM)."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from bubbles_search.core.constants import CACHE_KEY_SEP, CACHE_PREFIX_SEARCH
from bubbles_search.domain.enums import ContentCategory, VisibilityScope


@dataclass(frozen=True)
class SearchableDocument:
    """One candidate from a content source, in the shape shared by every category."""

    source_id: int | str
    category: ContentCategory
    title: str
    body: str  # may contain HTML; stripped before matching
    created_at: datetime | None
    visibility: VisibilityScope
    link_target: str
    # Category specific fields flattened into the result (e.g. postId for replies)
    extra: dict[str, Any] = field(default_factory=dict)
    # False when the title is generated (e.g. "Comment on post #3") and must not match terms
    match_title: bool = True


@dataclass(frozen=True)
class MatchRecord:
    """First hit of one query term in a document, with surrounding text."""

    matched_term: str
    context: str

    def to_dict(self) -> dict[str, str]:
        return {"text": self.matched_term, "context": self.context}


@dataclass(frozen=True)
class SearchResult:
    """Matched document with its excerpt and match records."""

    document: SearchableDocument
    excerpt: str
    matches: tuple[MatchRecord, ...]

    @property
    def match_count(self) -> int:
        return len(self.matches)

    def to_dict(self) -> dict[str, Any]:
        """Flatten into the wire shape (document fields + excerpt + matches)."""
        doc = self.document
        data: dict[str, Any] = {
            "id": doc.source_id,
            "title": doc.title,
            "excerpt": self.excerpt,
            "type": doc.category.value,
            "url": doc.link_target,
            "matches": [m.to_dict() for m in self.matches],
            "createdAt": doc.created_at.isoformat() if doc.created_at else None,
        }
        data.update(doc.extra)
        return data


@dataclass(frozen=True)
class SearchQuery:
    """Normalized search request. Built by the orchestrator after validation and clamping."""

    query: str  # lower-cased raw query
    terms: tuple[str, ...]
    types: tuple[str, ...]  # requested type names, as given
    limit: int
    page: int
    date_from: datetime | None
    category: str | None
    caller_is_privileged: bool

    def cache_key(self) -> str:
        """Canonical key for the result cache.

        The privilege flag is part of the key so a page containing privileged
        results is never served to an unprivileged caller. Types keep request
        order because meta.types echoes them.
        """
        params = {
            "q": self.query,
            "types": list(self.types),
            "limit": self.limit,
            "page": self.page,
            "from": self.date_from.isoformat() if self.date_from else None,
            "category": self.category,
            "privileged": self.caller_is_privileged,
        }
        canonical = json.dumps(params, sort_keys=True, separators=(",", ":"))
        return f"{CACHE_PREFIX_SEARCH}{CACHE_KEY_SEP}{canonical}"


@dataclass(frozen=True)
class Suggestion:
    """Typeahead hit (title/body substring match on stories)."""

    id: int | str
    title: str
    type: str
    url: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title, "type": self.type, "url": self.url}


@dataclass(frozen=True)
class TrendingQuery:
    """Tracked query and how many times it was executed."""

    query: str
    count: int
