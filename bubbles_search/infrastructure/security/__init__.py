"""Security: bearer token verification (privilege flag for search)."""

from bubbles_search.infrastructure.security.jwt import (
    create_access_token,
    is_privileged_token,
    verify_token,
)

__all__ = [
    "create_access_token",
    "is_privileged_token",
    "verify_token",
]
