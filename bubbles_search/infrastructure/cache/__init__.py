"""Cache: search result page caches (in-process TTL map or Redis).

Both implement application.interfaces.IResultCache. The backend is chosen
by SEARCH_CACHE_BACKEND at startup (see core.lifespan).
"""

from bubbles_search.infrastructure.cache.memory_cache import InMemoryTTLCache
from bubbles_search.infrastructure.cache.redis_cache import CacheService

__all__ = [
    "CacheService",
    "InMemoryTTLCache",
]
