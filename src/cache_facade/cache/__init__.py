"""
Cache Facade — Cache Module

Provides the cache interface and its backends.

Layout:
- factory.py: builds a connected backend from configuration
- interface.py: abstract interface plus the shared forever/pull/remember logic
- backends/: memory and Redis implementations

Usage:
    from cache_facade.cache import create_cache

    cache = await create_cache()
    await cache.put("key", "value", ttl=3600)
    value = await cache.get("key")
    await cache.close()
"""

from .factory import create_cache
from .interface import TTL, CacheInterface, Callback

__all__ = [
    "create_cache",
    "CacheInterface",
    "Callback",
    "TTL",
]
