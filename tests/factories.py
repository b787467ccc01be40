"""Record builders and mock repositories shared by the test modules."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

from bubbles_search.application.dtos.content import (
    CommentRecord,
    PostRecord,
    ReportRecord,
    UserRecord,
)


def make_post(
    id: int,
    title: str,
    content: str,
    created_at: datetime | None = None,
    slug: str | None = None,
    is_secret: bool = False,
    theme_category: str | None = None,
) -> PostRecord:
    return PostRecord(
        id=id,
        title=title,
        content=content,
        slug=slug or f"post-{id}",
        is_secret=is_secret,
        theme_category=theme_category,
        created_at=created_at or datetime(2024, 1, 1, tzinfo=UTC),
    )


def make_comment(id: int, content: str, post_id: int = 1, user_id: int = 7) -> CommentRecord:
    return CommentRecord(
        id=id,
        content=content,
        post_id=post_id,
        user_id=user_id,
        created_at=datetime(2024, 1, 2, tzinfo=UTC),
    )


def make_user(id: int, username: str, email: str) -> UserRecord:
    return UserRecord(
        id=id, username=username, email=email, created_at=datetime(2024, 1, 3, tzinfo=UTC)
    )


def make_report(id: int, content_type: str, content_id: int, reason: str, status: str = "pending") -> ReportRecord:
    return ReportRecord(
        id=id,
        content_type=content_type,
        content_id=content_id,
        reason=reason,
        status=status,
        created_at=datetime(2024, 1, 4, tzinfo=UTC),
    )


def make_post_repo(posts: list[PostRecord]) -> AsyncMock:
    """AsyncMock post repository honouring is_secret for list_secret."""
    repo = AsyncMock()
    repo.list_all.return_value = posts
    repo.list_secret.return_value = [p for p in posts if p.is_secret]
    return repo


def make_list_repo(rows: list) -> AsyncMock:
    repo = AsyncMock()
    repo.list_all.return_value = rows
    return repo
