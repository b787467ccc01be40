"""Application services: content sources, term matching, ranking, trending."""

from bubbles_search.application.services.content_sources import (
    AccountSource,
    CommentSource,
    PageSource,
    PostSource,
    ReferenceSource,
    ReportSource,
    build_content_sources,
)
from bubbles_search.application.services.ranking import paginate, rank_results
from bubbles_search.application.services.term_matcher import (
    match_document,
    strip_html,
    to_search_result,
)
from bubbles_search.application.services.trending import TrendingTracker, levenshtein

__all__ = [
    "AccountSource",
    "CommentSource",
    "PageSource",
    "PostSource",
    "ReferenceSource",
    "ReportSource",
    "TrendingTracker",
    "build_content_sources",
    "levenshtein",
    "match_document",
    "paginate",
    "rank_results",
    "strip_html",
    "to_search_result",
]
