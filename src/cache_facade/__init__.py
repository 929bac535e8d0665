"""
Cache Facade — Friendly async cache operations over Redis

get, put, has, remember, pull, forever, forget and flush on top of
redis-py's asyncio client, with an in-memory backend for tests.
"""

__version__ = "1.0.0"

from .cache import TTL, CacheInterface, Callback, create_cache
from .cache.backends.memory import MemoryCacheBackend
from .config import CacheBackend, CacheConfig, FacadeConfig, RedisConfig, load_config
from .errors import (
    CacheConnectionError,
    CacheError,
    CacheFacadeError,
    CacheSerializationError,
    CallbackExecutionError,
    ConfigurationError,
    ErrorCode,
    KeyNotFoundError,
    NilCallbackError,
)
from .observability import configure_logging

__all__ = [
    # Cache
    "create_cache",
    "CacheInterface",
    "MemoryCacheBackend",
    "Callback",
    "TTL",
    # Config
    "load_config",
    "FacadeConfig",
    "CacheConfig",
    "CacheBackend",
    "RedisConfig",
    # Errors
    "CacheFacadeError",
    "ConfigurationError",
    "CacheError",
    "CacheConnectionError",
    "KeyNotFoundError",
    "NilCallbackError",
    "CallbackExecutionError",
    "CacheSerializationError",
    "ErrorCode",
    # Logging
    "configure_logging",
]
