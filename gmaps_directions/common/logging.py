"""
Logging utilities for the Google Maps Directions client.

Provides structured logging with JSON formatting for production environments
and human-readable formatting for development.
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger

from .config import config


class StructuredFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter that adds common fields to all log records."""

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any],
    ) -> None:
        """Add common fields to log records."""
        super().add_fields(log_record, record, message_dict)

        # Add timestamp in ISO format
        log_record["timestamp"] = (
            datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + "Z"
        )

        # Add environment and service info
        log_record["environment"] = config.environment
        log_record["service"] = "gmaps-directions"

        # Add level name if not present
        if "level" not in log_record:
            log_record["level"] = record.levelname


def setup_logging(
    logger_name: Optional[str] = None,
    level: Optional[str] = None,
    enable_structured: Optional[bool] = None,
) -> logging.Logger:
    """
    Set up logging with configuration from environment.

    Args:
        logger_name: Name of the logger (defaults to root)
        level: Log level override
        enable_structured: Structured logging override

    Returns:
        Configured logger instance
    """

    # Use configuration values or provided overrides
    log_level = level or config.logging.level
    structured = (
        enable_structured
        if enable_structured is not None
        else config.logging.enable_structured_logging
    )

    # Get logger
    logger = logging.getLogger(logger_name)
    logger.setLevel(getattr(logging, log_level.upper()))

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    # Create console handler
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, log_level.upper()))

    # Set up formatter
    if structured:
        formatter = StructuredFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
    else:
        formatter = logging.Formatter(config.logging.format_str)

    handler.setFormatter(formatter)
    logger.addHandler(handler)

    # Prevent double logging
    logger.propagate = False

    return logger


def log_api_request(
    endpoint: str,
    method: str = "GET",
    status_code: Optional[int] = None,
    duration_ms: Optional[float] = None,
    **kwargs,
) -> Dict[str, Any]:
    """
    Create a structured log entry for API requests.

    Args:
        endpoint: API endpoint called
        method: HTTP method
        status_code: Response status code
        duration_ms: Request duration in milliseconds
        **kwargs: Additional context

    Returns:
        Log entry dictionary
    """
    entry = {
        "event": "api_request",
        "provider": "google",
        "endpoint": endpoint,
        "method": method,
    }

    if status_code is not None:
        entry["status_code"] = status_code
    if duration_ms is not None:
        entry["duration_ms"] = duration_ms

    entry.update(kwargs)
    return entry


class TimedLogger:
    """Context manager for timing operations and logging results."""

    def __init__(self, logger: logging.Logger, operation: str, **context):
        self.logger = logger
        self.operation = operation
        self.context = context
        self.start_time = None

    def __enter__(self):
        self.start_time = datetime.now(timezone.utc)
        self.logger.debug(
            f"Starting {self.operation}",
            extra={
                "event": "operation_start",
                "operation": self.operation,
                **self.context,
            },
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration_ms = (
            datetime.now(timezone.utc) - self.start_time
        ).total_seconds() * 1000

        if exc_type is None:
            self.logger.info(
                f"Completed {self.operation}",
                extra={
                    "event": "operation_complete",
                    "operation": self.operation,
                    "duration_ms": duration_ms,
                    "success": True,
                    **self.context,
                },
            )
        else:
            self.logger.error(
                f"Failed {self.operation}: {exc_val}",
                extra={
                    "event": "operation_failed",
                    "operation": self.operation,
                    "duration_ms": duration_ms,
                    "success": False,
                    "error_type": exc_type.__name__,
                    "error_message": str(exc_val),
                    **self.context,
                },
            )


# Global logger instance
logger = setup_logging("gmaps_directions")


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a specific module or component."""
    return setup_logging(f"gmaps_directions.{name}")
