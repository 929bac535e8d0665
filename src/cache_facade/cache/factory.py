"""
Cache Facade — Cache Factory

Creates a connected cache backend from configuration.

Key points:
- Select the backend with CACHE_BACKEND=memory|redis
  - Defaults to redis when REDIS_HOST is set, memory otherwise
- The factory keeps no registry: construct one cache at startup and pass it
  explicitly to everything that needs it

Examples:
    from cache_facade.cache.factory import create_cache

    # Uses env-configured backend
    cache = await create_cache()

    # Or explicitly supply a CacheConfig (e.g., for tests)
    from cache_facade.config import CacheBackend, CacheConfig, RedisConfig
    cfg = CacheConfig(backend=CacheBackend.REDIS, redis=RedisConfig(host="localhost", port=6379))
    async with await create_cache(cfg) as cache:
        await cache.put("key", "value", ttl=60)
"""

from __future__ import annotations

import logging

from ..config import CacheBackend, CacheConfig, load_config
from ..errors import ConfigurationError
from .backends.memory import MemoryCacheBackend
from .interface import CacheInterface

logger = logging.getLogger(__name__)


async def _create_redis_cache(config: CacheConfig) -> CacheInterface:
    """Internal helper to connect a redis cache backend with lazy import."""
    if config.redis is None:
        raise ConfigurationError(
            "Redis settings must be provided when CACHE_BACKEND=redis",
            details={"env": "REDIS_HOST", "backend": "redis"},
        )

    # Lazy import so the memory backend works without redis installed
    try:
        from .backends.redis import RedisCacheBackend
    except ImportError as e:
        logger.error(
            "Redis backend selected but redis client is not installed",
            extra={"package": "redis>=5.0.1", "error": str(e)},
        )
        raise ConfigurationError(
            "Redis backend selected but redis client is unavailable. "
            "Install with: pip install 'redis>=5.0.1' or add to dependencies.",
            details={"package": "redis>=5.0.1", "error": str(e), "backend": "redis"},
        ) from e

    return await RedisCacheBackend.connect(config.redis)


async def create_cache(config: CacheConfig | None = None) -> CacheInterface:
    """
    Create a ready-to-use cache backend.

    Args:
        config: Cache configuration (loaded from the environment if not provided)

    Returns:
        Connected cache backend; the caller owns it and must close it

    Raises:
        ConfigurationError: If the configuration is invalid or the backend unavailable
        CacheConnectionError: If the Redis server cannot be reached
    """
    if config is None:
        config = load_config().cache

    backend = CacheBackend(config.backend)
    logger.info("Creating cache with backend: %s", backend.value, extra={"backend": backend.value})

    if backend == CacheBackend.MEMORY:
        return MemoryCacheBackend()
    if backend == CacheBackend.REDIS:
        return await _create_redis_cache(config)

    raise ConfigurationError(  # pragma: no cover
        f"Unknown cache backend: {backend}",
        details={"backend": str(backend), "supported": [b.value for b in CacheBackend]},
    )
