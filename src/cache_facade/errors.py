"""
Cache Facade - Core Error Types

Defines the exception hierarchy for the cache facade.
All exceptions raised by the facade itself inherit from CacheFacadeError.

Errors coming from the underlying store client (redis-py) are NOT wrapped:
they propagate unchanged so callers can handle them with the client's own
exception types. The only translation performed is "key absent" into
KeyNotFoundError.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """
    Standard error codes for structured error responses.

    Lets callers branch on failures without matching on message strings.
    """

    # Configuration errors
    INVALID_CONFIG = "INVALID_CONFIG"

    # Cache errors
    CACHE_FAILURE = "CACHE_FAILURE"
    CACHE_MISS = "CACHE_MISS"
    CONNECTION_FAILED = "CONNECTION_FAILED"

    # Read-through errors
    NIL_CALLBACK = "NIL_CALLBACK"
    CALLBACK_FAILED = "CALLBACK_FAILED"
    SERIALIZATION_FAILED = "SERIALIZATION_FAILED"

    # Internal errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class CacheFacadeError(Exception):
    """Base exception for all cache facade errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        status_code: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(CacheFacadeError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, details, status_code=500)


class CacheError(CacheFacadeError):
    """Base exception for cache-related errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None, status_code: int = 500):
        super().__init__(message, details, status_code=status_code)


class CacheConnectionError(CacheError):
    """Raised when the cache backend cannot be reached at construction time."""

    def __init__(self, backend: str, details: dict[str, Any] | None = None):
        message = f"Failed to connect to cache backend: {backend}"
        super().__init__(message, details, status_code=503)
        self.backend = backend


class KeyNotFoundError(CacheError):
    """Raised when a key is absent from the cache or has expired."""

    def __init__(self, key: str):
        super().__init__("key not found in cache", {"key": key}, status_code=404)
        self.key = key


class NilCallbackError(CacheError):
    """Raised by remember() when no callback is supplied."""

    def __init__(self, key: str | None = None):
        details = {"key": key} if key is not None else None
        super().__init__("callback function cannot be None", details, status_code=400)


class CallbackExecutionError(CacheError):
    """Raised by remember() when the callback itself fails."""

    def __init__(self, key: str, cause: BaseException):
        super().__init__(
            f"callback execution failed: {cause}",
            {"key": key, "error": str(cause), "error_type": type(cause).__name__},
        )


class CacheSerializationError(CacheError):
    """Raised by remember() when the callback result cannot be encoded as JSON."""

    def __init__(self, key: str, value_type: str, cause: BaseException):
        super().__init__(
            f"failed to marshal callback result: {cause}",
            {"key": key, "value_type": value_type, "error": str(cause)},
        )


def extract_error_code(error: Exception) -> ErrorCode:
    """
    Extract the ErrorCode matching an exception.

    Args:
        error: Exception to categorize

    Returns:
        ErrorCode for the exception (INTERNAL_ERROR for anything foreign)
    """
    if isinstance(error, KeyNotFoundError):
        return ErrorCode.CACHE_MISS

    if isinstance(error, CacheConnectionError):
        return ErrorCode.CONNECTION_FAILED

    if isinstance(error, NilCallbackError):
        return ErrorCode.NIL_CALLBACK

    if isinstance(error, CallbackExecutionError):
        return ErrorCode.CALLBACK_FAILED

    if isinstance(error, CacheSerializationError):
        return ErrorCode.SERIALIZATION_FAILED

    if isinstance(error, CacheError):
        return ErrorCode.CACHE_FAILURE

    if isinstance(error, ConfigurationError):
        return ErrorCode.INVALID_CONFIG

    return ErrorCode.INTERNAL_ERROR
