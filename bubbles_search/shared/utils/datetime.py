"""
UTC datetime utilities for consistent timezone handling.

All datetime values in the service should be timezone-aware UTC.
Use these helpers instead of datetime.now() or datetime.utcnow().
"""

from datetime import UTC, datetime, timedelta


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Use at repository boundaries; the platform stores naive timestamps.

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        UTC-aware datetime or None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def parse_since(value: str | None, now: datetime | None = None) -> datetime | None:
    """
    Parse a "from" filter: a positive day count or an ISO-8601 date/datetime.

    "7" means seven days before now; "2024-10-31" or "2024-10-31T00:00:00Z"
    is taken literally (naive values are UTC). Anything else, including zero
    or negative day counts, yields None (no filter).

    Args:
        value: Raw query parameter value
        now: Reference time for day counts (defaults to utc_now())

    Returns:
        UTC-aware lower bound or None
    """
    if value is None:
        return None
    raw = value.strip()
    if not raw:
        return None
    if raw.lstrip("+-").isdigit():
        days = int(raw)
        if days <= 0:
            return None
        try:
            return (now or utc_now()) - timedelta(days=days)
        except OverflowError:
            return None
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        return None
    return ensure_utc(parsed)
