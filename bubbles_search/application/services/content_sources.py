"""Content source adapters: one per searchable content category.

Each source reads its candidate set from a repository (or a fixed in-memory
set) and translates rows into SearchableDocument. Sources never match terms.

Sources are registered in a fixed table keyed by the request type name
(``posts``, ``pages``, ``comments``, ``legal``, ``settings``, ``users``,
``reported``); privilege gating reads the source's visibility.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from bubbles_search.application.dtos.content import (
    CommentRecord,
    PostRecord,
    ReportRecord,
    UserRecord,
)
from bubbles_search.application.dtos.search import SearchableDocument
from bubbles_search.application.services.reference_pages import (
    LEGAL_PAGES,
    SETTINGS_PAGES,
    ReferencePage,
)
from bubbles_search.domain.enums import ContentCategory, VisibilityScope
from bubbles_search.shared.utils.datetime import ensure_utc, utc_now

if TYPE_CHECKING:
    from bubbles_search.application.interfaces.repositories import (
        ICommentRepository,
        IPostRepository,
        IReportRepository,
        IUserRepository,
    )
    from bubbles_search.application.interfaces.services import IContentSource

# Alternative request type names accepted for a registered source.
SOURCE_TYPE_ALIASES: dict[str, str] = {
    "documents": "posts",
    "document": "posts",
    "post": "posts",
    "page": "pages",
    "comment": "comments",
    "replies": "comments",
    "user": "users",
    "accounts": "users",
    "reports": "reported",
}


def canonical_type_name(name: str) -> str:
    """Map a requested type name onto its registry key."""
    key = name.strip().lower()
    return SOURCE_TYPE_ALIASES.get(key, key)


def _field_values(*values: str | None) -> str:
    """Searchable body for record-like sources: the field values only, one per line."""
    return "\n".join(v for v in values if v)


class PostSource:
    """Stories (``posts``). Supports the theme category filter."""

    name = "posts"
    category = ContentCategory.DOCUMENT
    visibility = VisibilityScope.PUBLIC
    max_sentences = 3

    def __init__(self, post_repo: IPostRepository) -> None:
        self.post_repo = post_repo

    async def fetch_candidates(
        self,
        date_from: datetime | None = None,
        category_filter: str | None = None,
    ) -> list[SearchableDocument]:
        posts = await self.post_repo.list_all(created_from=date_from)
        if category_filter:
            wanted = category_filter.strip().lower()
            posts = [p for p in posts if (p.theme_category or "").lower() == wanted]
        return [self._to_document(p) for p in posts]

    def _to_document(self, post: PostRecord) -> SearchableDocument:
        return SearchableDocument(
            source_id=post.id,
            category=self.category,
            title=post.title or "",
            body=post.content or "",
            created_at=ensure_utc(post.created_at),
            visibility=self.visibility,
            link_target=f"/reader/{post.id}",
        )


class PageSource:
    """Posts flagged ``is_secret``, served as standalone pages by slug."""

    name = "pages"
    category = ContentCategory.PAGE
    visibility = VisibilityScope.PUBLIC
    max_sentences = 2

    def __init__(self, post_repo: IPostRepository) -> None:
        self.post_repo = post_repo

    async def fetch_candidates(
        self,
        date_from: datetime | None = None,
        category_filter: str | None = None,
    ) -> list[SearchableDocument]:
        posts = await self.post_repo.list_secret(created_from=date_from)
        return [
            SearchableDocument(
                source_id=p.id,
                category=self.category,
                title=p.title or "",
                body=p.content or "",
                created_at=ensure_utc(p.created_at),
                visibility=self.visibility,
                link_target=f"/page/{p.slug}",
            )
            for p in posts
        ]


class CommentSource:
    """Reader comments. Only the comment text is searchable."""

    name = "comments"
    category = ContentCategory.REPLY
    visibility = VisibilityScope.PUBLIC
    max_sentences = 3

    def __init__(self, comment_repo: ICommentRepository) -> None:
        self.comment_repo = comment_repo

    async def fetch_candidates(
        self,
        date_from: datetime | None = None,
        category_filter: str | None = None,
    ) -> list[SearchableDocument]:
        comments = await self.comment_repo.list_all(created_from=date_from)
        return [self._to_document(c) for c in comments]

    def _to_document(self, comment: CommentRecord) -> SearchableDocument:
        return SearchableDocument(
            source_id=comment.id,
            category=self.category,
            title=f"Comment on post #{comment.post_id}",
            body=comment.content or "",
            created_at=ensure_utc(comment.created_at),
            visibility=self.visibility,
            link_target=f"/reader/{comment.post_id}#comment-{comment.id}",
            extra={"postId": comment.post_id, "userId": comment.user_id},
            match_title=False,
        )


class ReferenceSource:
    """Fixed in-memory reference pages (legal or settings help).

    Static pages carry the fetch time as their timestamp and are not
    date-filtered.
    """

    category = ContentCategory.REFERENCE
    visibility = VisibilityScope.PUBLIC
    max_sentences = 3

    def __init__(self, name: str, pages: tuple[ReferencePage, ...]) -> None:
        self.name = name
        self.pages = pages

    async def fetch_candidates(
        self,
        date_from: datetime | None = None,
        category_filter: str | None = None,
    ) -> list[SearchableDocument]:
        now = utc_now()
        return [
            SearchableDocument(
                source_id=page.id,
                category=self.category,
                title=page.title,
                body=page.content,
                created_at=now,
                visibility=self.visibility,
                link_target=page.url,
                extra={"section": self.name},
            )
            for page in self.pages
        ]


class AccountSource:
    """User accounts (username and email). Privileged callers only."""

    name = "users"
    category = ContentCategory.ACCOUNT
    visibility = VisibilityScope.PRIVILEGED
    max_sentences = 3

    def __init__(self, user_repo: IUserRepository) -> None:
        self.user_repo = user_repo

    async def fetch_candidates(
        self,
        date_from: datetime | None = None,
        category_filter: str | None = None,
    ) -> list[SearchableDocument]:
        users = await self.user_repo.list_all(created_from=date_from)
        return [self._to_document(u) for u in users]

    def _to_document(self, user: UserRecord) -> SearchableDocument:
        return SearchableDocument(
            source_id=user.id,
            category=self.category,
            title=user.username or "",
            body=_field_values(user.username, user.email),
            created_at=ensure_utc(user.created_at),
            visibility=self.visibility,
            link_target=f"/admin/users/{user.id}",
            extra={"adminOnly": True},
        )


class ReportSource:
    """Moderation reports (reason and status). Privileged callers only."""

    name = "reported"
    category = ContentCategory.REPORT
    visibility = VisibilityScope.PRIVILEGED
    max_sentences = 3

    def __init__(self, report_repo: IReportRepository) -> None:
        self.report_repo = report_repo

    async def fetch_candidates(
        self,
        date_from: datetime | None = None,
        category_filter: str | None = None,
    ) -> list[SearchableDocument]:
        reports = await self.report_repo.list_all(created_from=date_from)
        return [self._to_document(r) for r in reports]

    def _to_document(self, report: ReportRecord) -> SearchableDocument:
        if report.content_type == "post":
            url = f"/reader/{report.content_id}"
        else:
            url = f"/admin/reports/{report.id}"
        return SearchableDocument(
            source_id=report.id,
            category=self.category,
            title=f"Reported {report.content_type} #{report.content_id}",
            body=_field_values(report.reason, report.status),
            created_at=ensure_utc(report.created_at),
            visibility=self.visibility,
            link_target=url,
            extra={"adminOnly": True},
            match_title=False,
        )


def build_content_sources(
    post_repo: IPostRepository,
    comment_repo: ICommentRepository,
    user_repo: IUserRepository,
    report_repo: IReportRepository,
) -> dict[str, IContentSource]:
    """Build the source registry keyed by request type name."""
    sources: list[IContentSource] = [
        PostSource(post_repo),
        PageSource(post_repo),
        CommentSource(comment_repo),
        ReferenceSource("legal", LEGAL_PAGES),
        ReferenceSource("settings", SETTINGS_PAGES),
        AccountSource(user_repo),
        ReportSource(report_repo),
    ]
    return {source.name: source for source in sources}
