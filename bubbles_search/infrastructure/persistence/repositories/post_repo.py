"""Post repository. Interface methods return application DTOs."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from bubbles_search.application.dtos.content import PostRecord
from bubbles_search.infrastructure.persistence.models.post import Post
from bubbles_search.infrastructure.persistence.repositories.base import BaseRepository


def _post_to_record(p: Post) -> PostRecord:
    """Map ORM Post to application PostRecord."""
    return PostRecord(
        id=p.id,
        title=p.title,
        content=p.content,
        slug=p.slug,
        is_secret=bool(p.is_secret),
        theme_category=p.theme_category,
        created_at=p.created_at,
    )


class PostRepository(BaseRepository[Post]):
    """Stories and pages (read-only)."""

    def __init__(self, db: AsyncSession | None) -> None:
        super().__init__(db, Post)

    async def list_all(self, created_from: datetime | None = None) -> list[PostRecord]:
        """Every post, optionally created at or after created_from."""
        rows = await self._list_rows(created_from)
        return [_post_to_record(p) for p in rows]

    async def list_secret(self, created_from: datetime | None = None) -> list[PostRecord]:
        """Posts flagged is_secret (served as pages)."""
        rows = await self._list_rows(created_from, Post.is_secret.is_(True))
        return [_post_to_record(p) for p in rows]
