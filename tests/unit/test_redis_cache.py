"""Tests for the Redis result cache with an injected client."""

import json
from unittest.mock import AsyncMock

import redis.asyncio as redis

from bubbles_search.infrastructure.cache.redis_cache import CacheService


async def test_get_deserializes_json() -> None:
    client = AsyncMock()
    client.get.return_value = json.dumps({"results": [], "meta": {"total": 0}})
    cache = CacheService(redis_client=client)
    assert await cache.get("search:k") == {"results": [], "meta": {"total": 0}}


async def test_get_miss_returns_none() -> None:
    client = AsyncMock()
    client.get.return_value = None
    assert await CacheService(redis_client=client).get("search:k") is None


async def test_set_uses_setex_with_ttl() -> None:
    client = AsyncMock()
    cache = CacheService(redis_client=client)
    assert await cache.set("search:k", {"a": 1}, ttl=300) is True
    client.setex.assert_awaited_once_with("search:k", 300, json.dumps({"a": 1}))


async def test_unavailable_cache_degrades_to_miss() -> None:
    cache = CacheService()
    assert cache.is_available() is False
    assert await cache.get("search:k") is None
    assert await cache.set("search:k", {"a": 1}) is False


async def test_redis_error_on_get_is_a_miss() -> None:
    client = AsyncMock()
    client.get.side_effect = redis.ResponseError("WRONGTYPE")
    assert await CacheService(redis_client=client).get("search:k") is None
