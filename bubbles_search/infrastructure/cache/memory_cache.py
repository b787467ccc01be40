"""In-process TTL cache for search result pages.

Entries older than their TTL are treated as absent and evicted lazily on
read; nothing sweeps in the background. An optional size bound evicts the
oldest entry first.
"""

from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class InMemoryTTLCache:
    """Process-wide map of key -> (stored_at, ttl, payload).

    Payloads are returned as stored (same object), so a hit is identical
    to what was put. Thread-safe; last writer wins.
    """

    def __init__(
        self,
        default_ttl: int = 300,
        max_entries: int | None = 1000,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.default_ttl = default_ttl
        self.max_entries = max_entries
        self._clock = clock
        self._entries: OrderedDict[str, tuple[float, float, Any]] = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def is_available(self) -> bool:
        return True

    async def get(self, key: str) -> Any | None:
        """Return the cached payload, or None if missing or older than its TTL."""
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                logger.debug("Cache MISS: %s", key)
                return None
            stored_at, ttl, value = entry
            if now - stored_at >= ttl:
                del self._entries[key]
                logger.debug("Cache EXPIRED: %s", key)
                return None
        logger.debug("Cache HIT: %s", key)
        return value

    async def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        """Store value; overwrites any previous (possibly expired) entry."""
        effective_ttl = float(ttl if ttl is not None else self.default_ttl)
        with self._lock:
            self._entries.pop(key, None)
            self._entries[key] = (self._clock(), effective_ttl, value)
            if self.max_entries is not None:
                while len(self._entries) > self.max_entries:
                    self._entries.popitem(last=False)
        logger.debug("Cache SET: %s (TTL: %ss)", key, effective_ttl)
        return True
