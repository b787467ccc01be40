"""Tests for the in-process TTL result cache."""

from bubbles_search.infrastructure.cache.memory_cache import InMemoryTTLCache


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


async def test_get_returns_stored_payload() -> None:
    cache = InMemoryTTLCache(clock=FakeClock())
    payload = {"results": [], "meta": {"total": 0}}
    assert await cache.set("search:k", payload) is True
    assert await cache.get("search:k") is payload


async def test_missing_key_is_none() -> None:
    cache = InMemoryTTLCache()
    assert await cache.get("search:missing") is None


async def test_entry_expires_after_ttl() -> None:
    clock = FakeClock()
    cache = InMemoryTTLCache(default_ttl=300, clock=clock)
    await cache.set("search:k", {"v": 1})
    clock.now += 299
    assert await cache.get("search:k") == {"v": 1}
    clock.now += 1
    assert await cache.get("search:k") is None
    assert len(cache) == 0


async def test_per_entry_ttl_overrides_default() -> None:
    clock = FakeClock()
    cache = InMemoryTTLCache(default_ttl=300, clock=clock)
    await cache.set("search:k", "v", ttl=10)
    clock.now += 10
    assert await cache.get("search:k") is None


async def test_overwrite_refreshes_timestamp() -> None:
    clock = FakeClock()
    cache = InMemoryTTLCache(default_ttl=300, clock=clock)
    await cache.set("search:k", "old")
    clock.now += 200
    await cache.set("search:k", "new")
    clock.now += 200
    assert await cache.get("search:k") == "new"


async def test_max_entries_evicts_oldest() -> None:
    cache = InMemoryTTLCache(max_entries=2, clock=FakeClock())
    await cache.set("a", 1)
    await cache.set("b", 2)
    await cache.set("c", 3)
    assert await cache.get("a") is None
    assert await cache.get("b") == 2
    assert await cache.get("c") == 3


async def test_memory_cache_is_always_available() -> None:
    assert InMemoryTTLCache().is_available() is True
