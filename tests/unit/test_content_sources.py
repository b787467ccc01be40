"""Tests for content source adapters and the source registry."""

from datetime import UTC, datetime

from bubbles_search.application.services.content_sources import (
    AccountSource,
    PageSource,
    ReferenceSource,
    ReportSource,
    build_content_sources,
    canonical_type_name,
)
from bubbles_search.application.services.reference_pages import LEGAL_PAGES, SETTINGS_PAGES
from bubbles_search.application.services.term_matcher import match_document
from bubbles_search.domain.enums import ContentCategory, VisibilityScope
from tests.factories import make_list_repo, make_post, make_post_repo, make_report, make_user


def test_registry_covers_every_request_type() -> None:
    sources = build_content_sources(
        make_post_repo([]), make_list_repo([]), make_list_repo([]), make_list_repo([])
    )
    assert set(sources) == {"posts", "pages", "comments", "legal", "settings", "users", "reported"}
    assert sources["users"].visibility is VisibilityScope.PRIVILEGED
    assert sources["reported"].visibility is VisibilityScope.PRIVILEGED
    assert sources["legal"].category is ContentCategory.REFERENCE


def test_canonical_type_name_aliases() -> None:
    assert canonical_type_name(" Documents ") == "posts"
    assert canonical_type_name("reports") == "reported"
    assert canonical_type_name("legal") == "legal"


async def test_page_source_uses_secret_posts_and_slug_url() -> None:
    posts = [
        make_post(1, "Story", "Body"),
        make_post(2, "About", "Who we are", slug="about-us", is_secret=True),
    ]
    docs = await PageSource(make_post_repo(posts)).fetch_candidates()
    assert [d.source_id for d in docs] == [2]
    assert docs[0].link_target == "/page/about-us"
    assert docs[0].category is ContentCategory.PAGE


async def test_naive_timestamps_become_utc() -> None:
    posts = [make_post(2, "About", "x", is_secret=True, created_at=datetime(2024, 3, 1))]
    docs = await PageSource(make_post_repo(posts)).fetch_candidates()
    assert docs[0].created_at == datetime(2024, 3, 1, tzinfo=UTC)


async def test_reference_source_ignores_date_filter() -> None:
    source = ReferenceSource("legal", LEGAL_PAGES)
    docs = await source.fetch_candidates(date_from=datetime(2999, 1, 1, tzinfo=UTC))
    assert len(docs) == len(LEGAL_PAGES)
    assert docs[0].extra == {"section": "legal"}
    assert docs[0].link_target == "/legal/privacy"


async def test_settings_pages_are_searchable_text() -> None:
    docs = await ReferenceSource("settings", SETTINGS_PAGES).fetch_candidates()
    assert {d.title for d in docs} >= {"Account Settings", "Security Settings"}


async def test_account_source_body_and_link() -> None:
    repo = make_list_repo([make_user(5, "nightowl", "owl@example.com")])
    docs = await AccountSource(repo).fetch_candidates()
    assert docs[0].body == "nightowl\nowl@example.com"
    assert docs[0].link_target == "/admin/users/5"
    assert docs[0].extra == {"adminOnly": True}


async def test_account_field_labels_are_not_searchable() -> None:
    repo = make_list_repo([make_user(5, "nightowl", "owl@example.com")])
    doc = (await AccountSource(repo).fetch_candidates())[0]
    assert match_document(doc, ["email"]) is None
    assert match_document(doc, ["username"]) is None
    matches = match_document(doc, ["owl@example.com"])
    assert matches is not None
    assert matches[0].context == "owl@example.com"


async def test_report_body_is_reason_and_status_only() -> None:
    repo = make_list_repo([make_report(7, "post", 3, "Spam links", status="open")])
    doc = (await ReportSource(repo).fetch_candidates())[0]
    assert doc.body == "Spam links\nopen"
    assert doc.link_target == "/reader/3"
    assert match_document(doc, ["reason"]) is None
    assert match_document(doc, ["status"]) is None
    assert match_document(doc, ["spam"]) is not None
