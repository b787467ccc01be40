"""Persistence repositories. Re-exports for dependency injection."""

from bubbles_search.infrastructure.persistence.repositories.base import BaseRepository
from bubbles_search.infrastructure.persistence.repositories.comment_repo import (
    CommentRepository,
)
from bubbles_search.infrastructure.persistence.repositories.post_repo import PostRepository
from bubbles_search.infrastructure.persistence.repositories.report_repo import (
    ReportRepository,
)
from bubbles_search.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "BaseRepository",
    "CommentRepository",
    "PostRepository",
    "ReportRepository",
    "UserRepository",
]
