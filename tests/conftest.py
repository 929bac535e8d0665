"""
Cache Facade — Test Configuration and Shared Fixtures

Provides pytest configuration and shared fixtures for unit and integration tests.
"""

import os
import socket
from collections.abc import AsyncGenerator
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from cache_facade.cache.backends.memory import MemoryCacheBackend
from cache_facade.config import RedisConfig

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "DEBUG"

TEST_REDIS_HOST = os.environ.get("TEST_REDIS_HOST", "localhost")
TEST_REDIS_PORT = int(os.environ.get("TEST_REDIS_PORT", "6379"))

CONFIG_ENV_VARS = (
    "ENVIRONMENT",
    "LOG_LEVEL",
    "CACHE_BACKEND",
    "REDIS_HOST",
    "REDIS_PORT",
    "REDIS_PASSWORD",
    "REDIS_DB",
    "REDIS_SOCKET_TIMEOUT",
    "REDIS_MAX_CONNECTIONS",
)


def is_redis_available() -> bool:
    """Check if Redis server is available for testing."""
    try:
        with socket.create_connection((TEST_REDIS_HOST, TEST_REDIS_PORT), timeout=1):
            return True
    except OSError:
        return False


@pytest.fixture
def test_redis_config() -> RedisConfig:
    """Redis settings for testing (database 15 for isolation)."""
    return RedisConfig(
        host=TEST_REDIS_HOST,
        port=TEST_REDIS_PORT,
        password=os.environ.get("TEST_REDIS_PASSWORD", ""),
        db=15,
        socket_timeout=2,
    )


@pytest.fixture
def live_redis_config(test_redis_config: RedisConfig) -> RedisConfig:
    """Redis settings for a server that is known to be reachable; skips otherwise."""
    if not is_redis_available():
        pytest.skip("Redis not available")
    return test_redis_config


@pytest.fixture
async def memory_cache() -> AsyncGenerator[MemoryCacheBackend, None]:
    """Fresh in-memory cache, closed after the test."""
    cache = MemoryCacheBackend()
    yield cache
    await cache.close()


@pytest.fixture
def mock_redis() -> MagicMock:
    """A mock redis.asyncio.Redis client with the commands the backend uses."""
    mock = MagicMock()
    mock.get = AsyncMock(return_value=None)
    mock.set = AsyncMock(return_value=True)
    mock.exists = AsyncMock(return_value=0)
    mock.delete = AsyncMock(return_value=0)
    mock.flushall = AsyncMock(return_value=True)
    mock.ping = AsyncMock(return_value=True)
    mock.aclose = AsyncMock()
    return mock


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> pytest.MonkeyPatch:
    """
    Remove every configuration variable and run from an empty directory.

    Each variable is set before being deleted so monkeypatch restores it on
    teardown even when load_dotenv() writes it during the test.
    """
    for name in CONFIG_ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return monkeypatch
