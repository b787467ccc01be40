"""Typeahead use case: title-first substring suggestions over stories."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bubbles_search.application.dtos.search import Suggestion
from bubbles_search.application.services.term_matcher import strip_html
from bubbles_search.core.constants import (
    TYPEAHEAD_DEFAULT_LIMIT,
    TYPEAHEAD_MAX_LIMIT,
    TYPEAHEAD_MAX_QUERY_LENGTH,
    TYPEAHEAD_MIN_LENGTH,
)
from bubbles_search.domain.enums import ContentCategory

if TYPE_CHECKING:
    from bubbles_search.application.interfaces.repositories import IPostRepository


class TypeaheadService:
    """Autocomplete for partial queries; independent of the federated search path."""

    def __init__(self, post_repo: IPostRepository) -> None:
        self.post_repo = post_repo

    async def suggest(self, partial_query: str | None, limit: int | None = None) -> list[Suggestion]:
        """Return up to limit stories whose title, then body, contains the partial query.

        Queries shorter than TYPEAHEAD_MIN_LENGTH or longer than
        TYPEAHEAD_MAX_QUERY_LENGTH characters return an empty list. Title matches
        come first; body-only matches (on the HTML-stripped body) fill any
        remaining slots.
        """
        search = (partial_query or "").strip().lower()
        if not TYPEAHEAD_MIN_LENGTH <= len(search) <= TYPEAHEAD_MAX_QUERY_LENGTH:
            return []
        if limit is None:
            limit = TYPEAHEAD_DEFAULT_LIMIT
        limit = min(max(limit, 1), TYPEAHEAD_MAX_LIMIT)

        posts = await self.post_repo.list_all()
        picked = [p for p in posts if search in (p.title or "").lower()][:limit]
        remaining = limit - len(picked)
        if remaining > 0:
            picked_ids = {p.id for p in picked}
            picked.extend(
                [
                    p
                    for p in posts
                    if p.id not in picked_ids
                    and search not in (p.title or "").lower()
                    and search in strip_html(p.content or "").lower()
                ][:remaining]
            )
        return [
            Suggestion(
                id=p.id,
                title=p.title or "Untitled",
                type=ContentCategory.DOCUMENT.value,
                url=f"/reader/{p.id}",
            )
            for p in picked
        ]
