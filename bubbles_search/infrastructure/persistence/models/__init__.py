"""ORM models for the platform tables read by search."""

from bubbles_search.infrastructure.persistence.models.comment import Comment
from bubbles_search.infrastructure.persistence.models.post import Post
from bubbles_search.infrastructure.persistence.models.reported_content import (
    ReportedContent,
)
from bubbles_search.infrastructure.persistence.models.user import User

__all__ = [
    "Comment",
    "Post",
    "ReportedContent",
    "User",
]
