"""Comment repository. Interface methods return application DTOs."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from bubbles_search.application.dtos.content import CommentRecord
from bubbles_search.infrastructure.persistence.models.comment import Comment
from bubbles_search.infrastructure.persistence.repositories.base import BaseRepository


class CommentRepository(BaseRepository[Comment]):
    """Reader comments (read-only)."""

    def __init__(self, db: AsyncSession | None) -> None:
        super().__init__(db, Comment)

    async def list_all(self, created_from: datetime | None = None) -> list[CommentRecord]:
        rows = await self._list_rows(created_from)
        return [
            CommentRecord(
                id=c.id,
                content=c.content,
                post_id=c.post_id,
                user_id=c.user_id,
                created_at=c.created_at,
            )
            for c in rows
        ]
