"""DTOs for rows read from the platform's content tables (no dependency on ORM).

Repositories map ORM rows into these read-models; content sources map them
into SearchableDocument.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PostRecord:
    """Story or page (row of ``posts``)."""

    id: int
    title: str
    content: str
    slug: str
    is_secret: bool
    theme_category: str | None
    created_at: datetime | None


@dataclass(frozen=True)
class CommentRecord:
    """Reader comment on a post (row of ``comments``)."""

    id: int
    content: str
    post_id: int | None
    user_id: int | None
    created_at: datetime | None


@dataclass(frozen=True)
class UserRecord:
    """Account (row of ``users``). No credentials."""

    id: int
    username: str
    email: str
    created_at: datetime | None


@dataclass(frozen=True)
class ReportRecord:
    """Moderation report (row of ``reported_content``)."""

    id: int
    content_type: str
    content_id: int
    reason: str
    status: str
    created_at: datetime | None
