"""Mint a privileged bearer token for search (accounts and reports become visible).

Usage:
    python -m scripts.create_admin_token <subject> [minutes]
Signed with SECRET_KEY from the environment / .env.
"""

import sys
from datetime import timedelta

from bubbles_search.core.config import get_settings
from bubbles_search.infrastructure.security.jwt import create_access_token


def main() -> None:
    """Print a token carrying is_admin for the given subject."""
    if len(sys.argv) < 2:
        print("Usage: python -m scripts.create_admin_token <subject> [minutes]", file=sys.stderr)
        sys.exit(1)
    subject = sys.argv[1]
    minutes = int(sys.argv[2]) if len(sys.argv) > 2 else None

    if not get_settings().secret_key.get_secret_value():
        print("SECRET_KEY is not set", file=sys.stderr)
        sys.exit(1)
    token = create_access_token(
        {"sub": subject, "is_admin": True},
        expires_delta=timedelta(minutes=minutes) if minutes else None,
    )
    print(token)


if __name__ == "__main__":
    main()
