"""Base repository: shared read queries over the platform's content tables."""

from datetime import UTC, datetime
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import ColumnElement

from bubbles_search.domain.exceptions import SqlNotConfiguredException
from bubbles_search.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with date-filtered full scans.

    Subclasses map rows to application DTOs; they never filter by search terms.
    A repository built without a session (no DATABASE_URL) raises
    SqlNotConfiguredException on every query.
    """

    def __init__(self, db: AsyncSession | None, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def _list_rows(
        self,
        created_from: datetime | None = None,
        *criteria: ColumnElement[bool],
    ) -> list[ModelType]:
        """Return every row (optionally created at or after created_from), ordered by id."""
        if self.db is None:
            raise SqlNotConfiguredException()
        model: Any = self.model
        stmt = select(self.model)
        if created_from is not None:
            # Platform timestamps are naive UTC.
            if created_from.tzinfo is not None:
                created_from = created_from.astimezone(UTC).replace(tzinfo=None)
            stmt = stmt.where(model.created_at >= created_from)
        for criterion in criteria:
            stmt = stmt.where(criterion)
        result = await self.db.execute(stmt.order_by(model.id))
        return list(result.scalars().all())
