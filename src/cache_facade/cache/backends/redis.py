"""
Cache Facade — Redis Cache Backend

Asynchronous Redis cache delegating straight to redis-py's asyncio client:

- get      -> GET (nil reply becomes KeyNotFoundError)
- has      -> EXISTS
- put      -> SET with PX milliseconds (plain SET when ttl is zero)
- forget   -> DEL
- flush    -> FLUSHALL
- connect  -> PING

Errors raised by redis-py pass through unchanged; nothing is retried here.
Connection pooling, the wire protocol and socket timeouts are the client's.

Requires: redis>=5.0.1 with asyncio support

Example:
    config = RedisConfig(host="localhost", port=6379)
    async with await RedisCacheBackend.connect(config) as cache:
        await cache.put("greeting", "hello", ttl=60)
        value = await cache.get("greeting")
"""

from __future__ import annotations

import logging

from ...config import RedisConfig
from ...errors import CacheConnectionError, KeyNotFoundError
from ..interface import TTL, CacheInterface, ttl_milliseconds

logger = logging.getLogger(__name__)

try:
    # redis-py asyncio client (v4.2+)
    from redis.asyncio import Redis
except ImportError as e:  # pragma: no cover
    raise ImportError(
        "Redis async client is required but not installed. "
        "Install with: pip install 'redis>=5.0.1' or add 'redis' to your dependencies."
    ) from e


class RedisCacheBackend(CacheInterface):
    """
    Redis cache backend.

    Notes:
    - Keys are used verbatim; there is no namespace prefix.
    - Values are stored as UTF-8 strings and returned decoded.
    - flush() issues FLUSHALL, which empties every database on the server.
    """

    def __init__(self, client: Redis) -> None:
        """
        Wrap an existing redis.asyncio client.

        The client should be created with decode_responses=True. Use
        connect() to build and verify a client from a RedisConfig.
        """
        self._client = client
        self._closed = False

    @classmethod
    async def connect(cls, config: RedisConfig) -> RedisCacheBackend:
        """
        Build a client from config and verify it with PING.

        Raises:
            CacheConnectionError: If the server is unreachable or rejects the settings
        """
        details = {"address": config.address, "db": config.db}
        try:
            client = Redis(
                host=config.host,
                port=config.port,
                password=config.password or None,
                db=config.db,
                decode_responses=True,
                socket_timeout=config.socket_timeout,
                socket_connect_timeout=config.socket_timeout,
                max_connections=config.max_connections,
            )
        except Exception as e:
            logger.error("Invalid Redis settings for %s: %s", config.address, e, extra={**details, "error": str(e)})
            raise CacheConnectionError("redis", details={**details, "error": str(e)}) from e

        try:
            await client.ping()
        except Exception as e:
            logger.error(
                "Failed to connect to Redis at %s: %s",
                config.address,
                e,
                extra={**details, "error": str(e)},
            )
            await client.aclose()
            raise CacheConnectionError("redis", details={**details, "error": str(e)}) from e
        except BaseException:
            # Cancelled mid-handshake: release the client, keep the cancellation
            await client.aclose()
            raise

        logger.info("Connected to Redis at %s (db %d)", config.address, config.db, extra=details)
        return cls(client)

    async def get(self, key: str) -> str:
        value = await self._client.get(key)
        if value is None:
            logger.debug("Cache miss: %s", key, extra={"key": key, "backend": "redis"})
            raise KeyNotFoundError(key)

        logger.debug("Cache hit: %s", key, extra={"key": key, "backend": "redis"})
        return value

    async def has(self, key: str) -> bool:
        return await self._client.exists(key) > 0

    async def put(self, key: str, value: str, ttl: TTL) -> None:
        await self._client.set(name=key, value=value, px=ttl_milliseconds(ttl))

    async def forget(self, key: str) -> None:
        await self._client.delete(key)

    async def flush(self) -> None:
        await self._client.flushall()
        logger.info("Flushed all Redis databases", extra={"backend": "redis"})

    async def close(self) -> None:
        """Close the Redis client and its connection pool."""
        if self._closed:
            return
        await self._client.aclose()
        self._closed = True
        logger.info("Closed Redis cache backend", extra={"backend": "redis"})
