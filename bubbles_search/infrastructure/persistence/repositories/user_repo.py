"""User repository (accounts). Returns application DTOs without credentials."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from bubbles_search.application.dtos.content import UserRecord
from bubbles_search.infrastructure.persistence.models.user import User
from bubbles_search.infrastructure.persistence.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Accounts (read-only). Only reached for privileged callers."""

    def __init__(self, db: AsyncSession | None) -> None:
        super().__init__(db, User)

    async def list_all(self, created_from: datetime | None = None) -> list[UserRecord]:
        rows = await self._list_rows(created_from)
        return [
            UserRecord(id=u.id, username=u.username, email=u.email, created_at=u.created_at)
            for u in rows
        ]
