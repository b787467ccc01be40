"""Application use cases: one entry point per workflow."""

from bubbles_search.application.use_cases.search import SearchService, SearchState
from bubbles_search.application.use_cases.typeahead import TypeaheadService

__all__ = [
    "SearchService",
    "SearchState",
    "TypeaheadService",
]
