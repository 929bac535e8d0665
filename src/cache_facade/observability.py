"""
Cache Facade — Logging Setup

Structured JSON logging for the package logger.

Library modules only create loggers (logging.getLogger(__name__)); an
application opts into JSON output by calling configure_logging() once at
startup.
"""

import json
import logging
from datetime import UTC, datetime

from .config import FacadeConfig, LogLevel

PACKAGE_LOGGER = "cache_facade"

# Attributes every LogRecord carries; anything else came in through `extra=`
_RESERVED_ATTRS = frozenset(
    {
        "args",
        "msg",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "name",
        "message",
    }
)


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        for key, value in record.__dict__.items():
            if key not in log_data and not key.startswith("_") and key not in _RESERVED_ATTRS:
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def configure_logging(level: LogLevel | str | FacadeConfig = LogLevel.INFO) -> logging.Logger:
    """
    Install a JSON stream handler on the package logger.

    Replaces any handlers previously installed on that logger, so calling it
    again just changes the level.

    Args:
        level: Log level, or a FacadeConfig whose log_level is used

    Returns:
        The configured package logger
    """
    if isinstance(level, FacadeConfig):
        level = level.log_level
    level_name = level.value if isinstance(level, LogLevel) else str(level).upper()

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)
    logger.setLevel(level_name)

    return logger
