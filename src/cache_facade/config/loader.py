"""
Cache Facade — Configuration Loader

Loads and validates configuration from environment variables and .env files.

Each call builds a fresh FacadeConfig; there is no module-level instance.
Construct the config once at startup and pass it (or the cache built from it)
to whatever needs it.
"""

import logging
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import ValidationError

from ..errors import ConfigurationError
from .schemas import FacadeConfig

logger = logging.getLogger(__name__)


def _optional(name: str) -> str | None:
    """Return the variable's value, treating an empty string as unset."""
    value = os.getenv(name)
    return value if value else None


def _redis_settings() -> dict[str, Any] | None:
    host = _optional("REDIS_HOST")
    if host is None:
        return None

    socket_timeout = os.getenv("REDIS_SOCKET_TIMEOUT", "5")
    max_connections = _optional("REDIS_MAX_CONNECTIONS")
    return {
        "host": host,
        "port": os.getenv("REDIS_PORT", "6379"),
        "password": os.getenv("REDIS_PASSWORD", ""),
        "db": os.getenv("REDIS_DB", "0"),
        "socket_timeout": socket_timeout if socket_timeout.lower() != "none" else None,
        "max_connections": max_connections,
    }


def load_config(env_file: str | None = None) -> FacadeConfig:
    """
    Load configuration from environment variables and an optional .env file.

    Args:
        env_file: Path to .env file (default: .env in the working directory)

    Returns:
        Validated FacadeConfig instance

    Raises:
        ConfigurationError: If configuration is invalid
    """
    env_path = Path(env_file) if env_file else Path.cwd() / ".env"

    if env_path.exists():
        logger.info("Loading environment from %s", env_path)
        try:
            load_dotenv(env_path, override=True)
        except Exception as e:
            logger.error(
                "Failed to load .env file from %s: %s",
                env_path,
                e,
                extra={"path": str(env_path), "error": str(e)},
                exc_info=True,
            )
            raise ConfigurationError(
                f"Failed to load environment file: {e}",
                details={"path": str(env_path), "error": str(e)},
            ) from e
    else:
        logger.debug("No .env file found, using environment variables only")

    # Auto-detect cache backend: Redis if REDIS_HOST is set, else memory
    redis = _redis_settings()
    cache_backend = "redis" if redis else "memory"

    config_dict: dict[str, Any] = {
        "environment": os.getenv("ENVIRONMENT", "development"),
        "log_level": os.getenv("LOG_LEVEL", "INFO").upper(),
        "cache": {
            "backend": os.getenv("CACHE_BACKEND", cache_backend),
            "redis": redis,
        },
    }

    try:
        config = FacadeConfig(**config_dict)
    except ValidationError as e:
        logger.error(
            "Configuration validation failed: %s",
            e,
            extra={"validation_errors": e.errors(include_url=False)},
        )
        raise ConfigurationError(
            "Configuration validation failed. Check your environment variables and configuration.",
            details={"validation_errors": e.errors(include_url=False)},
        ) from e

    logger.info(
        "Configuration loaded (environment: %s, cache backend: %s)",
        config.environment.value,
        config.cache.backend.value,
        extra={"environment": config.environment.value, "cache_backend": config.cache.backend.value},
    )
    return config
