"""Application ports: repository and service protocols."""

from bubbles_search.application.interfaces.repositories import (
    ICommentRepository,
    IPostRepository,
    IReportRepository,
    IUserRepository,
)
from bubbles_search.application.interfaces.services import IContentSource, IResultCache

__all__ = [
    "ICommentRepository",
    "IContentSource",
    "IPostRepository",
    "IReportRepository",
    "IResultCache",
    "IUserRepository",
]
