"""
Cache Facade — Cache Backends

Exports available cache backend implementations.

Redis backend is lazy-loaded via factory.py so the memory backend works
without redis-py installed.
"""

from .memory import MemoryCacheBackend

__all__ = [
    "MemoryCacheBackend",
]
