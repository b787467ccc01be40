"""Tests for UTC datetime helpers and the "from" filter parser."""

from datetime import UTC, datetime, timedelta, timezone

from bubbles_search.shared.utils.datetime import ensure_utc, parse_since

NOW = datetime(2024, 10, 31, 12, 0, tzinfo=UTC)


def test_day_count_is_relative_to_now() -> None:
    assert parse_since("7", now=NOW) == NOW - timedelta(days=7)


def test_iso_date_and_zulu_datetime() -> None:
    assert parse_since("2024-10-01", now=NOW) == datetime(2024, 10, 1, tzinfo=UTC)
    assert parse_since("2024-10-01T06:30:00Z", now=NOW) == datetime(2024, 10, 1, 6, 30, tzinfo=UTC)


def test_offset_datetime_converted_to_utc() -> None:
    parsed = parse_since("2024-10-01T03:00:00+03:00", now=NOW)
    assert parsed == datetime(2024, 10, 1, 0, 0, tzinfo=UTC)


def test_invalid_values_mean_no_filter() -> None:
    assert parse_since(None) is None
    assert parse_since("") is None
    assert parse_since("yesterday") is None
    assert parse_since("0", now=NOW) is None
    assert parse_since("-5", now=NOW) is None
    assert parse_since("99999999999", now=NOW) is None


def test_ensure_utc() -> None:
    assert ensure_utc(None) is None
    assert ensure_utc(datetime(2024, 1, 1)) == datetime(2024, 1, 1, tzinfo=UTC)
    eastern = datetime(2024, 1, 1, 5, tzinfo=timezone(timedelta(hours=5)))
    assert ensure_utc(eastern) == datetime(2024, 1, 1, tzinfo=UTC)
