"""
Cache Facade — Cache Interface

Defines the abstract interface that all cache backends must implement.

Backends provide the primitives (get, has, put, forget, flush, close).
The composite operations (forever, pull, remember) are implemented here once,
on top of those primitives, so every backend shares the same contract.
"""

from __future__ import annotations

import dataclasses
import inspect
import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import timedelta
from types import TracebackType
from typing import Any, TypeAlias

from pydantic import BaseModel

from ..errors import CacheSerializationError, CallbackExecutionError, KeyNotFoundError, NilCallbackError

logger = logging.getLogger(__name__)

TTL: TypeAlias = timedelta | int | float
"""Time-to-live: a timedelta or a number of seconds. Zero or negative means no expiry."""

Callback: TypeAlias = Callable[[], Any]
"""Zero-argument producer; may return a plain value or an awaitable."""


def ttl_milliseconds(ttl: TTL) -> int | None:
    """
    Normalize a TTL to whole milliseconds.

    - zero or negative -> None (no expiry)
    - positive -> milliseconds, never less than 1
    """
    seconds = ttl.total_seconds() if isinstance(ttl, timedelta) else float(ttl)
    if seconds <= 0:
        return None
    return max(1, round(seconds * 1000))


def _json_default(value: Any) -> Any:
    """Encode objects json.dumps does not know natively."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any) -> str:
    """Serialize a value to compact JSON text, keeping field order. NaN and Infinity are rejected."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"), allow_nan=False, default=_json_default)


class CacheInterface(ABC):
    """
    Abstract base class for cache backends.

    All values are opaque strings. remember() additionally serializes the
    callback result to JSON before storing it.

    Instances are async context managers that close on exit.
    """

    @abstractmethod
    async def get(self, key: str) -> str:
        """
        Retrieve a value from the cache.

        Args:
            key: Cache key

        Returns:
            The stored value

        Raises:
            KeyNotFoundError: If the key is absent or expired
        """

    @abstractmethod
    async def has(self, key: str) -> bool:
        """
        Check if a key exists in the cache.

        Returns:
            True if key exists and is not expired, False otherwise
        """

    @abstractmethod
    async def put(self, key: str, value: str, ttl: TTL) -> None:
        """
        Store a value in the cache, replacing any existing one.

        Args:
            key: Cache key
            value: Value to store
            ttl: Time-to-live (zero = no expiry)
        """

    @abstractmethod
    async def forget(self, key: str) -> None:
        """Delete a key. Deleting an absent key is not an error."""

    @abstractmethod
    async def flush(self) -> None:
        """Remove every key from the store."""

    @abstractmethod
    async def close(self) -> None:
        """
        Close the cache backend and release resources.

        Calling close() more than once is a no-op.
        """

    async def forever(self, key: str, value: str) -> None:
        """Store a value with no expiration."""
        await self.put(key, value, 0)

    async def pull(self, key: str) -> str:
        """
        Retrieve a value and delete it.

        Raises:
            KeyNotFoundError: If the key is absent (nothing is deleted)
        """
        value = await self.get(key)
        await self.forget(key)
        return value

    async def remember(self, key: str, ttl: TTL, callback: Callback | None) -> str:
        """
        Get a value from the cache, or compute, store and return it.

        On a miss the callback is invoked (awaited if it returns an awaitable),
        its result is serialized to JSON and stored under key with ttl. The
        JSON text is returned in both the hit and miss cases.

        There is no locking: concurrent misses on the same key all run the
        callback, and the last write wins.

        Args:
            key: Cache key
            ttl: Time-to-live for a freshly computed value
            callback: Zero-argument producer of the value

        Returns:
            The cached or freshly stored JSON text

        Raises:
            NilCallbackError: If the key is missing and callback is None
            CallbackExecutionError: If the callback raises
            CacheSerializationError: If the result cannot be encoded as JSON
        """
        try:
            return await self.get(key)
        except KeyNotFoundError:
            pass

        if callback is None:
            raise NilCallbackError(key)

        logger.debug("Cache miss for '%s', invoking callback", key, extra={"key": key})

        try:
            result = callback()
            if inspect.isawaitable(result):
                result = await result
        except Exception as e:
            raise CallbackExecutionError(key, e) from e

        try:
            payload = to_json(result)
        except (TypeError, ValueError) as e:
            raise CacheSerializationError(key, type(result).__name__, e) from e

        await self.put(key, payload, ttl)
        return payload

    async def __aenter__(self) -> CacheInterface:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()
