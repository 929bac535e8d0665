"""
Cache Facade — Configuration Module

Provides typed configuration loading and validation.
"""

from .loader import load_config
from .schemas import (
    CacheBackend,
    CacheConfig,
    Environment,
    FacadeConfig,
    LogLevel,
    RedisConfig,
)

__all__ = [
    # Loader
    "load_config",
    # Main config
    "FacadeConfig",
    # Enums
    "Environment",
    "CacheBackend",
    "LogLevel",
    # Config sections
    "CacheConfig",
    "RedisConfig",
]
