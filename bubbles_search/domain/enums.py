"""Domain enumerations for the search engine.

Content categories and visibility scopes form a closed set; adapters are
registered per category and privilege gating is a lookup on the scope.
"""

from enum import Enum


class ContentCategory(str, Enum):
    """Kind of content a search result was drawn from (wire value is the result ``type``)."""

    DOCUMENT = "document"
    PAGE = "page"
    REPLY = "reply"
    REFERENCE = "reference"
    ACCOUNT = "account"
    REPORT = "report"

    @classmethod
    def values(cls) -> list[str]:
        """Return all category values as strings."""
        return [category.value for category in cls]


class VisibilityScope(str, Enum):
    """Who may see documents of a category.

    PRIVILEGED categories (accounts, moderation reports) are only searched
    when the caller was marked privileged at the request boundary.
    """

    PUBLIC = "public"
    PRIVILEGED = "privileged"
