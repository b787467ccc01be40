"""JWT verification for caller privilege.

Tokens are issued by the platform's auth service with the shared
SECRET_KEY; this service only reads them. create_access_token exists for
operators and tests. Uses bubbles_search.core.config for secret and algorithm.
"""

import logging
from datetime import UTC, datetime, timedelta
from typing import Any, cast

from jose import JWTError, jwt

from bubbles_search.core.config import get_settings

logger = logging.getLogger(__name__)

PRIVILEGE_CLAIM = "is_admin"


def create_access_token(
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """Create a JWT access token with the given claims.

    Args:
        data: Claims to encode (e.g. sub, is_admin).
        expires_delta: Optional TTL; else uses settings.access_token_expire_minutes.

    Returns:
        Encoded JWT string.
    """
    settings = get_settings()
    to_encode = data.copy()
    if expires_delta is not None:
        expire = datetime.now(UTC) + expires_delta
    else:
        expire = datetime.now(UTC) + timedelta(
            minutes=settings.access_token_expire_minutes
        )
    to_encode["exp"] = expire
    encoded = jwt.encode(
        to_encode,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded)


def verify_token(token: str) -> dict[str, Any]:
    """Verify and decode a JWT. Returns the payload.

    Enforces presence of exp and sub.

    Raises:
        ValueError: If token is invalid, expired, or missing required claims.
    """
    settings = get_settings()
    if not settings.secret_key.get_secret_value():
        raise ValueError("Token verification is not configured (SECRET_KEY unset)")
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    if "sub" not in payload:
        raise ValueError("Token missing required claim: sub")
    return payload


def is_privileged_token(token: str | None) -> bool:
    """True only for a valid token carrying ``is_admin: true``.

    Missing, invalid or expired tokens make the caller unprivileged; they
    never fail the request.
    """
    if not token:
        return False
    try:
        payload = verify_token(token)
    except ValueError as e:
        logger.debug("Ignoring bearer token: %s", e)
        return False
    return payload.get(PRIVILEGE_CLAIM) is True
