"""Tests for term matching, context extraction and excerpts."""

from datetime import UTC, datetime

from bubbles_search.application.dtos.search import SearchableDocument
from bubbles_search.application.services.term_matcher import (
    build_excerpt,
    match_document,
    split_sentences,
    strip_html,
    to_search_result,
)
from bubbles_search.domain.enums import ContentCategory, VisibilityScope


def _doc(title: str, body: str, match_title: bool = True) -> SearchableDocument:
    return SearchableDocument(
        source_id=1,
        category=ContentCategory.DOCUMENT,
        title=title,
        body=body,
        created_at=datetime(2024, 1, 1, tzinfo=UTC),
        visibility=VisibilityScope.PUBLIC,
        link_target="/reader/1",
        match_title=match_title,
    )


def test_strip_html_removes_tags_and_unescapes_entities() -> None:
    assert strip_html("<p>Tom &amp; <b>Jerry</b></p>") == "Tom & Jerry"


def test_strip_html_keeps_paragraphs_apart() -> None:
    plain = strip_html("<p>First paragraph</p><p>Second paragraph</p>")
    assert split_sentences(plain) == ["First paragraph", "Second paragraph"]


def test_strip_html_empty() -> None:
    assert strip_html("") == ""


def test_split_sentences_on_terminal_punctuation() -> None:
    assert split_sentences("One. Two! Three? Four") == ["One.", "Two!", "Three?", "Four"]


def test_no_term_present_returns_none() -> None:
    """A document with none of the terms is excluded."""
    assert match_document(_doc("A quiet night", "Nothing happens here."), ["ghost"]) is None


def test_title_only_hit_uses_title_as_context() -> None:
    matches = match_document(_doc("The Ghost Ship", "A tale of the sea."), ["ghost"])
    assert matches is not None
    assert len(matches) == 1
    assert matches[0].matched_term == "ghost"
    assert matches[0].context == "The Ghost Ship"


def test_generated_title_is_not_matched() -> None:
    """Titles flagged match_title=False never make a document match."""
    doc = _doc("Comment on post #3", "Loved it.", match_title=False)
    assert match_document(doc, ["comment"]) is None


def test_sentence_contexts_are_capped_per_term() -> None:
    body = "The ghost came. The ghost left. The ghost returned. The ghost stayed."
    matches = match_document(_doc("Untitled", body), ["ghost"], max_sentences=3)
    assert matches is not None
    assert [m.context for m in matches] == [
        "The ghost came.",
        "The ghost left.",
        "The ghost returned.",
    ]


def test_substring_hit_without_whole_word_falls_back_to_window() -> None:
    """'ghost' inside 'ghostly' matches, but no sentence has it as a word."""
    body = "x" * 100 + " a ghostly figure " + "y" * 100
    matches = match_document(_doc("Untitled", body), ["ghost"])
    assert matches is not None
    context = matches[0].context
    assert "ghostly" in context
    assert len(context) <= 60 + len("ghost") + 60


def test_body_matching_is_case_insensitive() -> None:
    matches = match_document(_doc("Untitled", "<p>The VAMPIRE woke.</p>"), ["vampire"])
    assert matches is not None
    assert matches[0].context == "The VAMPIRE woke."


def test_matching_is_idempotent() -> None:
    doc = _doc("Night", "The midnight hour. The hour of dread.")
    first = match_document(doc, ["midnight", "hour"])
    second = match_document(doc, ["midnight", "hour"])
    assert first == second


def test_excerpt_is_first_context() -> None:
    result = to_search_result(_doc("Untitled", "Calm. The wolf howled. More."), ["wolf"])
    assert result is not None
    assert result.excerpt == "The wolf howled."
    assert result.match_count == 1


def test_excerpt_fallback_truncates_body() -> None:
    doc = _doc("Untitled", "z" * 200)
    assert build_excerpt(doc, []) == "z" * 150 + "..."


def test_excerpt_fallback_short_body_is_whole_text() -> None:
    assert build_excerpt(_doc("Untitled", "short"), []) == "short"
