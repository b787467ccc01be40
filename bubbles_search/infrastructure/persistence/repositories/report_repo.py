"""Moderation report repository. Returns application DTOs."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from bubbles_search.application.dtos.content import ReportRecord
from bubbles_search.infrastructure.persistence.models.reported_content import (
    ReportedContent,
)
from bubbles_search.infrastructure.persistence.repositories.base import BaseRepository


class ReportRepository(BaseRepository[ReportedContent]):
    """Reported content (read-only). Only reached for privileged callers."""

    def __init__(self, db: AsyncSession | None) -> None:
        super().__init__(db, ReportedContent)

    async def list_all(self, created_from: datetime | None = None) -> list[ReportRecord]:
        rows = await self._list_rows(created_from)
        return [
            ReportRecord(
                id=r.id,
                content_type=r.content_type,
                content_id=r.content_id,
                reason=r.reason,
                status=r.status,
                created_at=r.created_at,
            )
            for r in rows
        ]
