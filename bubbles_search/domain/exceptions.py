"""Domain exceptions for the search service.

Defines domain-level exceptions independent of infrastructure concerns.
The presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class SearchException(Exception):
    """Base exception for all search service errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by the HTTP exception handler."""
        body: dict[str, Any] = {"error": self.error_code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class InvalidQueryException(SearchException):
    """Raised when a search query fails validation (HTTP 400)."""

    def __init__(
        self,
        message: str,
        query: str | None = None,
        min_term_length: int | None = None,
        max_query_length: int | None = None,
    ) -> None:
        """Initialize with message and the rejected query.

        Args:
            message: Explanation returned to the caller.
            query: The raw query that was rejected (omitted when empty).
            min_term_length: Minimum term length that was required.
            max_query_length: Maximum query length that was exceeded.
        """
        details: dict[str, Any] = {}
        if query:
            details["query"] = query
        if min_term_length is not None:
            details["min_term_length"] = min_term_length
        if max_query_length is not None:
            details["max_query_length"] = max_query_length
        super().__init__(message, "INVALID_QUERY", details)


class SourceUnavailableException(SearchException):
    """Raised when a content source cannot be read.

    A single failing source is excluded from the response; the orchestrator
    raises this to the caller only when every invoked source failed.
    """

    def __init__(self, sources: list[str], reason: str | None = None) -> None:
        """Initialize with the failed source names.

        Args:
            sources: Request type names of the sources that failed.
            reason: Optional short reason (e.g. 'timeout').
        """
        details: dict[str, Any] = {"sources": sources}
        if reason:
            details["reason"] = reason
        super().__init__(
            "Search sources are unavailable",
            "SOURCES_UNAVAILABLE",
            details,
        )


class SqlNotConfiguredException(SearchException):
    """Raised when an operation requires Postgres but DATABASE_URL is not set."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
