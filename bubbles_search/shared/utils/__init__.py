"""Shared utilities: datetime helpers."""

from bubbles_search.shared.utils.datetime import ensure_utc, parse_since, utc_now

__all__ = [
    "ensure_utc",
    "parse_since",
    "utc_now",
]
