"""Tests for the federated search orchestrator (SearchService)."""

import asyncio
from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest

from bubbles_search.application.services.content_sources import build_content_sources
from bubbles_search.application.use_cases.search import (
    SearchService,
    SearchState,
    clamp_limit,
    clamp_page,
    extract_terms,
)
from bubbles_search.domain.exceptions import (
    InvalidQueryException,
    SourceUnavailableException,
    SqlNotConfiguredException,
)
from tests.factories import (
    make_comment,
    make_list_repo,
    make_post,
    make_post_repo,
    make_report,
    make_user,
)


def _service(
    state: SearchState,
    posts: list | None = None,
    comments: list | None = None,
    users: list | None = None,
    reports: list | None = None,
    post_repo: AsyncMock | None = None,
    comment_repo: AsyncMock | None = None,
    **kwargs,
) -> SearchService:
    sources = build_content_sources(
        post_repo or make_post_repo(posts or []),
        comment_repo or make_list_repo(comments or []),
        make_list_repo(users or []),
        make_list_repo(reports or []),
    )
    return SearchService(sources, state, **kwargs)


def test_extract_terms_drops_short_and_duplicate_tokens() -> None:
    assert extract_terms("the midnight hour at the midnight") == ("the", "midnight", "hour")
    assert extract_terms("a an of") == ()


def test_clamp_limit_and_page() -> None:
    assert clamp_limit(None) == 20
    assert clamp_limit(0) == 1
    assert clamp_limit(500) == 50
    assert clamp_page(None) == 1
    assert clamp_page(-3) == 1


async def test_empty_query_rejected(search_state: SearchState) -> None:
    with pytest.raises(InvalidQueryException) as exc_info:
        await _service(search_state).search("   ")
    assert exc_info.value.error_code == "INVALID_QUERY"


async def test_query_without_long_term_rejected(search_state: SearchState) -> None:
    with pytest.raises(InvalidQueryException) as exc_info:
        await _service(search_state).search("a an")
    assert exc_info.value.details["min_term_length"] == 3


async def test_overlong_query_rejected_before_sources(search_state: SearchState) -> None:
    post_repo = make_post_repo([make_post(1, "Ghost", "Boo.")])
    with pytest.raises(InvalidQueryException) as exc_info:
        await _service(search_state, post_repo=post_repo).search("ghost " * 100)
    assert exc_info.value.details["max_query_length"] == 500
    post_repo.list_all.assert_not_awaited()


async def test_midnight_hour_ranking(search_state: SearchState) -> None:
    """Both-term matches rank above single-term matches; ties by recency."""
    posts = [
        make_post(1, "The Midnight Hour", "A tale.", created_at=datetime(2023, 5, 1, tzinfo=UTC)),
        make_post(2, "Untitled", "At midnight the bells rang.", created_at=datetime(2024, 5, 1, tzinfo=UTC)),
        make_post(3, "Dusk", "Every hour the clock struck.", created_at=datetime(2022, 5, 1, tzinfo=UTC)),
        make_post(4, "Calm", "Nothing to see.", created_at=datetime(2024, 6, 1, tzinfo=UTC)),
    ]
    payload = await _service(search_state, posts=posts).search("The Midnight Hour", requested_types=["posts"])
    ids = [r["id"] for r in payload["results"]]
    assert ids == [1, 2, 3]
    first = payload["results"][0]
    assert first["type"] == "document"
    assert first["url"] == "/reader/1"
    assert first["createdAt"] == "2023-05-01T00:00:00+00:00"
    assert payload["meta"]["total"] == 3
    assert payload["meta"]["query"] == "the midnight hour"
    assert payload["meta"]["didYouMean"] is None
    assert payload["meta"]["degraded"] is False


async def test_pagination_meta(search_state: SearchState) -> None:
    posts = [make_post(i, f"Ghost {i}", "Boo.") for i in range(1, 16)]
    payload = await _service(search_state, posts=posts).search(
        "ghost", requested_types=["posts"], limit=10, page=2
    )
    assert len(payload["results"]) == 5
    assert payload["meta"]["pages"] == 2
    assert payload["meta"]["page"] == 2
    assert payload["meta"]["limit"] == 10


async def test_cache_hit_returns_identical_payload_without_trending_update(
    search_state: SearchState,
) -> None:
    post_repo = make_post_repo([make_post(1, "Ghost", "Boo.")])
    service = _service(search_state, post_repo=post_repo)
    first = await service.search("ghost", requested_types=["posts"])
    second = await service.search("ghost", requested_types=["posts"])
    assert second == first
    assert search_state.trending.count("ghost") == 1
    post_repo.list_all.assert_awaited_once()


async def test_privilege_is_part_of_cache_key(search_state: SearchState) -> None:
    users = [make_user(5, "ghostwriter", "gw@example.com")]
    service = _service(search_state, users=users)
    admin = await service.search("ghostwriter", requested_types=["users"], caller_is_privileged=True)
    public = await service.search("ghostwriter", requested_types=["users"])
    assert admin["meta"]["total"] == 1
    assert admin["results"][0]["adminOnly"] is True
    assert public["meta"]["total"] == 0


async def test_privileged_sources_skipped_for_public_caller(search_state: SearchState) -> None:
    reports = [make_report(9, "post", 4, "Spam ghost links")]
    users = [make_user(5, "ghost", "ghost@example.com")]
    service = _service(
        search_state,
        posts=[make_post(1, "Ghost", "Boo.")],
        users=users,
        reports=reports,
    )
    payload = await service.search("ghost", requested_types=["posts", "users", "reported"])
    assert [r["type"] for r in payload["results"]] == ["document"]


async def test_report_links_to_reported_post(search_state: SearchState) -> None:
    reports = [make_report(9, "post", 4, "Spam ghost links")]
    payload = await _service(search_state, reports=reports).search(
        "spam", requested_types=["reported"], caller_is_privileged=True
    )
    assert payload["results"][0]["url"] == "/reader/4"
    assert payload["results"][0]["title"] == "Reported post #4"


async def test_comment_result_carries_post_reference(search_state: SearchState) -> None:
    comments = [make_comment(11, "This ghost story chilled me.", post_id=3, user_id=8)]
    payload = await _service(search_state, comments=comments).search("ghost", requested_types=["comments"])
    result = payload["results"][0]
    assert result["type"] == "reply"
    assert result["url"] == "/reader/3#comment-11"
    assert result["postId"] == 3
    assert result["userId"] == 8


async def test_unknown_types_are_ignored(search_state: SearchState) -> None:
    payload = await _service(search_state).search("privacy", requested_types=["nope", "legal"])
    assert payload["meta"]["total"] >= 1
    assert all(r["type"] == "reference" for r in payload["results"])
    assert payload["meta"]["types"] == ["nope", "legal"]


async def test_default_types_exclude_privileged_sources(search_state: SearchState) -> None:
    service = _service(search_state, users=[make_user(1, "privacy", "p@example.com")])
    payload = await service.search("privacy", caller_is_privileged=True)
    assert all(r["type"] != "account" for r in payload["results"])


async def test_partial_failure_is_degraded_and_not_cached(search_state: SearchState) -> None:
    comment_repo = AsyncMock()
    comment_repo.list_all.side_effect = RuntimeError("connection reset")
    service = _service(
        search_state,
        posts=[make_post(1, "Ghost", "Boo.")],
        comment_repo=comment_repo,
    )
    payload = await service.search("ghost", requested_types=["posts", "comments"])
    assert payload["meta"]["total"] == 1
    assert payload["meta"]["degraded"] is True
    assert len(search_state.cache) == 0


async def test_all_sources_failing_raises(search_state: SearchState) -> None:
    post_repo = AsyncMock()
    post_repo.list_all.side_effect = RuntimeError("db down")
    post_repo.list_secret.side_effect = RuntimeError("db down")
    service = _service(search_state, post_repo=post_repo)
    with pytest.raises(SourceUnavailableException) as exc_info:
        await service.search("ghost", requested_types=["posts", "pages"])
    assert exc_info.value.details["sources"] == ["posts", "pages"]


async def test_unconfigured_database_excludes_storage_sources(search_state: SearchState) -> None:
    post_repo = AsyncMock()
    post_repo.list_all.side_effect = SqlNotConfiguredException()
    post_repo.list_secret.side_effect = SqlNotConfiguredException()
    comment_repo = AsyncMock()
    comment_repo.list_all.side_effect = SqlNotConfiguredException()
    service = _service(search_state, post_repo=post_repo, comment_repo=comment_repo)
    payload = await service.search("privacy")
    assert payload["meta"]["degraded"] is True
    assert payload["meta"]["total"] >= 1


async def test_slow_source_times_out(search_state: SearchState) -> None:
    async def slow(created_from=None):
        await asyncio.sleep(5)
        return []

    comment_repo = AsyncMock()
    comment_repo.list_all.side_effect = slow
    service = _service(
        search_state,
        posts=[make_post(1, "Ghost", "Boo.")],
        comment_repo=comment_repo,
        source_timeout_seconds=0.05,
    )
    payload = await service.search("ghost", requested_types=["posts", "comments"])
    assert payload["meta"]["total"] == 1
    assert payload["meta"]["degraded"] is True


async def test_did_you_mean_on_zero_results(search_state: SearchState) -> None:
    service = _service(search_state, posts=[make_post(1, "Vampire", "Fangs.")])
    await service.search("vampire", requested_types=["posts"])
    payload = await service.search("vampier", requested_types=["posts"])
    assert payload["meta"]["total"] == 0
    assert payload["meta"]["didYouMean"] == "vampire"

    payload = await service.search("zzzzzzz", requested_types=["posts"])
    assert payload["meta"]["didYouMean"] is None


async def test_category_filter_applies_to_stories(search_state: SearchState) -> None:
    posts = [
        make_post(1, "Ghost A", "Boo.", theme_category="Gothic"),
        make_post(2, "Ghost B", "Boo.", theme_category="cosmic"),
    ]
    payload = await _service(search_state, posts=posts).search(
        "ghost", requested_types=["posts"], category="gothic"
    )
    assert [r["id"] for r in payload["results"]] == [1]
    assert payload["meta"]["category"] == "gothic"


async def test_date_filter_is_passed_to_repositories(search_state: SearchState) -> None:
    post_repo = make_post_repo([])
    since = datetime(2024, 1, 1, tzinfo=UTC)
    await _service(search_state, post_repo=post_repo).search(
        "ghost", requested_types=["posts"], date_from=since
    )
    post_repo.list_all.assert_awaited_once_with(created_from=since)
