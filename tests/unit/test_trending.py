"""Tests for the trending tracker and did-you-mean suggestions."""

import pytest

from bubbles_search.application.services.trending import (
    TrendingTracker,
    levenshtein,
    normalize_query,
)


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        ("", "", 0),
        ("abc", "", 3),
        ("kitten", "sitting", 3),
        ("vampier", "vampire", 2),
        ("ghost", "ghost", 0),
    ],
)
def test_levenshtein(a: str, b: str, expected: int) -> None:
    assert levenshtein(a, b) == expected


def test_normalize_query_trims_lowercases_and_caps() -> None:
    assert normalize_query("  The FOG  ") == "the fog"
    assert len(normalize_query("x" * 200)) == 80


def test_record_counts_normalized_queries() -> None:
    tracker = TrendingTracker()
    tracker.record("Vampire")
    tracker.record(" vampire ")
    assert tracker.count("VAMPIRE") == 2
    assert "vampire" in tracker
    assert len(tracker) == 1


def test_capacity_evicts_least_recently_recorded() -> None:
    tracker = TrendingTracker(capacity=2)
    tracker.record("alpha")
    tracker.record("beta")
    tracker.record("alpha")  # alpha is now most recent
    tracker.record("gamma")
    assert "beta" not in tracker
    assert "alpha" in tracker
    assert "gamma" in tracker


def test_invalid_capacity_rejected() -> None:
    with pytest.raises(ValueError):
        TrendingTracker(capacity=0)


def test_top_orders_by_count() -> None:
    tracker = TrendingTracker()
    for q in ["fog", "wolf", "wolf", "crypt", "wolf", "crypt"]:
        tracker.record(q)
    top = tracker.top(2)
    assert [(t.query, t.count) for t in top] == [("wolf", 3), ("crypt", 2)]


def test_suggest_within_distance() -> None:
    tracker = TrendingTracker()
    tracker.record("vampire")
    tracker.record("vampier")
    assert tracker.suggest("vampier") == "vampire"


def test_suggest_none_when_too_far() -> None:
    tracker = TrendingTracker()
    tracker.record("vampire")
    tracker.record("zzzzzzz")
    assert tracker.suggest("zzzzzzz") is None


def test_suggest_never_returns_query_itself() -> None:
    tracker = TrendingTracker()
    tracker.record("ghost")
    assert tracker.suggest("ghost") is None


def test_suggest_tie_break_is_first_tracked() -> None:
    tracker = TrendingTracker()
    tracker.record("cat")
    tracker.record("bat")
    # "hat" is one edit from both; "cat" was tracked first.
    assert tracker.suggest("hat") == "cat"
