"""
Cache Facade — Configuration Schemas

Typed configuration models using Pydantic for validation and type safety.

The Redis connection settings are deliberately permissive: host, port,
password and database index are not range-checked here. An unusable value
surfaces as a CacheConnectionError when the backend connects.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Environment(str, Enum):
    """Runtime environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TEST = "test"


class CacheBackend(str, Enum):
    """Supported cache backends."""

    MEMORY = "memory"
    REDIS = "redis"


class LogLevel(str, Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class RedisConfig(BaseModel):
    """Connection settings for a Redis server. Immutable once built."""

    host: str = Field(description="Redis server hostname or IP address")
    port: int = Field(description="Redis server port")
    password: str = Field(default="", description="AUTH password (empty = no authentication)")
    db: int = Field(default=0, description="Logical database index")

    socket_timeout: float | None = Field(default=5.0, description="Socket timeout in seconds (None = no timeout)")
    max_connections: int | None = Field(default=None, ge=1, description="Connection pool size (None = client default)")

    model_config = ConfigDict(frozen=True)

    @property
    def address(self) -> str:
        """host:port, for log messages."""
        return f"{self.host}:{self.port}"


class CacheConfig(BaseModel):
    """Cache backend selection."""

    backend: CacheBackend = Field(default=CacheBackend.MEMORY, description="Cache backend to use")
    redis: RedisConfig | None = Field(default=None, description="Redis settings (required when backend=redis)")

    @model_validator(mode="after")
    def validate_redis_settings(self) -> "CacheConfig":
        """Ensure Redis settings are provided when backend is redis."""
        if self.backend == CacheBackend.REDIS and self.redis is None:
            raise ValueError("redis settings are required when cache backend is 'redis'")
        return self


class FacadeConfig(BaseModel):
    """Root configuration."""

    environment: Environment = Field(default=Environment.DEVELOPMENT, description="Runtime environment")
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")

    cache: CacheConfig = Field(default_factory=CacheConfig)

    model_config = ConfigDict(validate_assignment=True)
