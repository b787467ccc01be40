"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from bubbles_search.domain.enums import ContentCategory, VisibilityScope
from bubbles_search.domain.exceptions import (
    InvalidQueryException,
    SearchException,
    SourceUnavailableException,
    SqlNotConfiguredException,
)

__all__ = [
    "ContentCategory",
    "InvalidQueryException",
    "SearchException",
    "SourceUnavailableException",
    "SqlNotConfiguredException",
    "VisibilityScope",
]
