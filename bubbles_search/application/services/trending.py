"""Trending query tracker and did-you-mean suggestion engine.

Process-wide, in-memory only (cleared on restart). The tracker is bounded:
once capacity is reached the least recently executed query is evicted, so
sustained unique-query traffic cannot grow it without limit.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass

from bubbles_search.application.dtos.search import TrendingQuery
from bubbles_search.core.constants import SUGGESTION_MAX_DISTANCE, TRENDING_QUERY_MAX_LENGTH

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 1000


def normalize_query(query: str) -> str:
    """Lower-case, trim and cap a query to the tracked key form."""
    return query.strip().lower()[:TRENDING_QUERY_MAX_LENGTH]


def levenshtein(a: str, b: str) -> int:
    """Edit distance (insertions, deletions, substitutions) between a and b."""
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + cost,
                )
            )
        previous = current
    return previous[-1]


@dataclass
class _Entry:
    count: int
    seq: int  # insertion sequence, used as the suggestion tie-break


class TrendingTracker:
    """Bounded counter of executed queries (LRU eviction).

    Thread-safe: all access goes through one lock.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._entries: OrderedDict[str, _Entry] = OrderedDict()
        self._next_seq = 0
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, query: object) -> bool:
        if not isinstance(query, str):
            return False
        with self._lock:
            return normalize_query(query) in self._entries

    def record(self, query: str) -> None:
        """Increment the counter for the normalized query (created at 1 if absent)."""
        key = normalize_query(query)
        if not key:
            return
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._entries[key] = _Entry(count=1, seq=self._next_seq)
                self._next_seq += 1
                if len(self._entries) > self.capacity:
                    evicted, _ = self._entries.popitem(last=False)
                    logger.debug("Trending EVICT: %s", evicted)
            else:
                entry.count += 1
                self._entries.move_to_end(key)

    def count(self, query: str) -> int:
        """Return how many times the normalized query was recorded (0 if not tracked)."""
        with self._lock:
            entry = self._entries.get(normalize_query(query))
            return entry.count if entry else 0

    def top(self, n: int = 10) -> list[TrendingQuery]:
        """Return the n most executed queries (ties: most recently executed first)."""
        if n <= 0:
            return []
        with self._lock:
            ordered = list(reversed(self._entries.items()))
        ordered.sort(key=lambda item: item[1].count, reverse=True)
        return [TrendingQuery(query=q, count=e.count) for q, e in ordered[:n]]

    def suggest(self, query: str, max_distance: int = SUGGESTION_MAX_DISTANCE) -> str | None:
        """Return the closest tracked query within max_distance edits, or None.

        The query itself is never suggested. Among equally close candidates the
        one tracked earliest wins, so the result is deterministic.
        """
        key = normalize_query(query)
        if not key:
            return None
        with self._lock:
            candidates = [(q, e.seq) for q, e in self._entries.items() if q != key]
        best: tuple[int, int, str] | None = None
        for tracked, seq in candidates:
            # Length difference is a lower bound on edit distance.
            if abs(len(tracked) - len(key)) > max_distance:
                continue
            distance = levenshtein(key, tracked)
            if distance > max_distance:
                continue
            if best is None or (distance, seq) < (best[0], best[1]):
                best = (distance, seq, tracked)
        return best[2] if best else None
