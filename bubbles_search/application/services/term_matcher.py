"""Term matching and snippet extraction.

Single matcher for every content category: a document matches when any
query term occurs (case-insensitively) in its title or HTML-stripped body.
Each hit term yields its first sentence-level contexts, or a fixed window
around the first occurrence when no sentence contains the term as a word.
"""

from __future__ import annotations

import html
import re

import nh3

from bubbles_search.application.dtos.search import (
    MatchRecord,
    SearchableDocument,
    SearchResult,
)
from bubbles_search.core.constants import CONTEXT_WINDOW_CHARS, FALLBACK_EXCERPT_CHARS

MAX_SENTENCES_PER_TERM = 3

_BLOCK_BREAK_RE = re.compile(r"<\s*(?:br\s*/?|/\s*(?:p|div|li|h[1-6]|blockquote))\s*>", re.IGNORECASE)
_INLINE_SPACE_RE = re.compile(r"[ \t\r\f\v]+")
_BLANK_LINES_RE = re.compile(r"\s*\n\s*")
# Sentence ends at ., ! or ? followed by whitespace, or at a line break.
_SENTENCE_SPLIT_RE = re.compile(r"(?<=[.!?])\s+|\n+")


def strip_html(text: str) -> str:
    """Return plain text: tags removed, entities unescaped, whitespace collapsed.

    Block-level tags become line breaks so paragraphs stay separate sentences.
    nh3 drops every remaining tag (and script/style content) and escapes the
    text, which is unescaped again here.
    """
    if not text:
        return ""
    plain = _BLOCK_BREAK_RE.sub("\n", text)
    plain = nh3.clean(plain, tags=set())
    plain = html.unescape(plain)
    plain = _INLINE_SPACE_RE.sub(" ", plain)
    plain = _BLANK_LINES_RE.sub("\n", plain)
    return plain.strip()


def split_sentences(plain: str) -> list[str]:
    """Split plain text into trimmed, non-empty sentence-like spans."""
    return [s.strip() for s in _SENTENCE_SPLIT_RE.split(plain) if s and s.strip()]


def _word_pattern(term: str) -> re.Pattern[str]:
    return re.compile(rf"(?<!\w){re.escape(term)}(?!\w)", re.IGNORECASE)


def _window(plain: str, index: int, term_length: int) -> str:
    start = max(0, index - CONTEXT_WINDOW_CHARS)
    end = min(len(plain), index + term_length + CONTEXT_WINDOW_CHARS)
    return plain[start:end].strip()


def match_document(
    document: SearchableDocument,
    terms: list[str] | tuple[str, ...],
    max_sentences: int = MAX_SENTENCES_PER_TERM,
) -> list[MatchRecord] | None:
    """Return match records for document, or None if no term occurs in it.

    Terms are expected lower-cased. For a term found in the body, up to
    max_sentences sentences containing it as a whole word are returned; if
    none does, a window of CONTEXT_WINDOW_CHARS on each side of the first
    occurrence is used. A term found only in the title yields the title.

    Args:
        document: Candidate from a content source.
        terms: Lower-cased query terms.
        max_sentences: Sentence contexts kept per term.

    Returns:
        List of MatchRecord (possibly several per term), or None if excluded.
    """
    title = document.title if document.match_title and document.title else ""
    title_lower = title.lower()
    plain = strip_html(document.body)
    plain_lower = plain.lower()

    if not any(term in title_lower or term in plain_lower for term in terms):
        return None

    sentences: list[str] | None = None
    records: list[MatchRecord] = []
    for term in terms:
        index = plain_lower.find(term)
        if index == -1:
            if term in title_lower:
                records.append(MatchRecord(matched_term=term, context=title.strip()))
            continue
        if sentences is None:
            sentences = split_sentences(plain)
        pattern = _word_pattern(term)
        hits = [s for s in sentences if pattern.search(s)][:max_sentences]
        if hits:
            records.extend(MatchRecord(matched_term=term, context=s) for s in hits)
        else:
            records.append(
                MatchRecord(matched_term=term, context=_window(plain, index, len(term)))
            )
    return records


def build_excerpt(document: SearchableDocument, matches: list[MatchRecord]) -> str:
    """First match's context, else a fixed-length prefix of the stripped body."""
    if matches:
        return matches[0].context
    plain = strip_html(document.body)
    if len(plain) <= FALLBACK_EXCERPT_CHARS:
        return plain
    return plain[:FALLBACK_EXCERPT_CHARS] + "..."


def to_search_result(
    document: SearchableDocument,
    terms: list[str] | tuple[str, ...],
    max_sentences: int = MAX_SENTENCES_PER_TERM,
) -> SearchResult | None:
    """Match document and wrap it as a SearchResult; None when it does not match."""
    matches = match_document(document, terms, max_sentences=max_sentences)
    if matches is None:
        return None
    return SearchResult(
        document=document,
        excerpt=build_excerpt(document, matches),
        matches=tuple(matches),
    )
