"""
Cache Facade — Memory Cache Backend

In-process cache implementing the same contract as the Redis backend:
per-key TTL, whole-store flush, KeyNotFoundError on miss.
Suitable as a test double and for single-process development setups.
"""

import asyncio
import logging
import time

from ...errors import KeyNotFoundError
from ..interface import TTL, CacheInterface, ttl_milliseconds

logger = logging.getLogger(__name__)


class MemoryCacheBackend(CacheInterface):
    """
    In-memory cache backend.

    Entries are held in a dict of key -> (value, expiry). Expired entries are
    dropped lazily when touched. There is no size limit and no eviction.
    """

    def __init__(self) -> None:
        # Cache storage: key -> (value, monotonic expiry time or None)
        self._cache: dict[str, tuple[str, float | None]] = {}
        self._lock = asyncio.Lock()
        self._closed = False

    @staticmethod
    def _is_expired(expiry: float | None) -> bool:
        if expiry is None:
            return False
        return time.monotonic() >= expiry

    def _live_value(self, key: str) -> str | None:
        """Return the value for key, dropping it if expired. Caller holds the lock."""
        entry = self._cache.get(key)
        if entry is None:
            return None

        value, expiry = entry
        if self._is_expired(expiry):
            del self._cache[key]
            return None
        return value

    async def get(self, key: str) -> str:
        async with self._lock:
            value = self._live_value(key)

        if value is None:
            logger.debug("Cache miss: %s", key, extra={"key": key, "backend": "memory"})
            raise KeyNotFoundError(key)

        logger.debug("Cache hit: %s", key, extra={"key": key, "backend": "memory"})
        return value

    async def has(self, key: str) -> bool:
        async with self._lock:
            return self._live_value(key) is not None

    async def put(self, key: str, value: str, ttl: TTL) -> None:
        ms = ttl_milliseconds(ttl)
        expiry = time.monotonic() + ms / 1000 if ms is not None else None

        async with self._lock:
            self._cache[key] = (value, expiry)

    async def forget(self, key: str) -> None:
        async with self._lock:
            self._cache.pop(key, None)

    async def flush(self) -> None:
        async with self._lock:
            size = len(self._cache)
            self._cache.clear()
        logger.info("Flushed %d entries from memory cache", size, extra={"backend": "memory", "size": size})

    async def close(self) -> None:
        # Nothing to release; entries stay in process memory
        if self._closed:
            return
        self._closed = True
        logger.debug("Memory cache backend closed")
