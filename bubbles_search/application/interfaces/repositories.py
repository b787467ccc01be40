"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from bubbles_search.application.dtos.content import (
        CommentRecord,
        PostRecord,
        ReportRecord,
        UserRecord,
    )


class IPostRepository(Protocol):
    """Protocol for the story/page repository (DIP)."""

    async def list_all(self, created_from: datetime | None = None) -> list[PostRecord]:
        """Return every post, optionally only those created at or after created_from."""

    async def list_secret(self, created_from: datetime | None = None) -> list[PostRecord]:
        """Return posts flagged as pages (is_secret)."""


class ICommentRepository(Protocol):
    """Protocol for the comment repository (DIP)."""

    async def list_all(self, created_from: datetime | None = None) -> list[CommentRecord]:
        """Return every comment, optionally date-filtered."""


class IUserRepository(Protocol):
    """Protocol for the account repository (DIP). Privileged callers only."""

    async def list_all(self, created_from: datetime | None = None) -> list[UserRecord]:
        """Return every account, optionally date-filtered."""


class IReportRepository(Protocol):
    """Protocol for the moderation report repository (DIP). Privileged callers only."""

    async def list_all(self, created_from: datetime | None = None) -> list[ReportRecord]:
        """Return every report, optionally date-filtered."""
