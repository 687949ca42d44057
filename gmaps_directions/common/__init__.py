"""
Common utilities for the Google Maps Directions client.

This package provides shared configuration and logging used across the
directions components.
"""

from .config import config, AppConfig, DirectionsConfig, load_config
from .logging import logger, get_logger, setup_logging, TimedLogger, log_api_request

__all__ = [
    "config",
    "AppConfig",
    "DirectionsConfig",
    "load_config",
    "logger",
    "get_logger",
    "setup_logging",
    "TimedLogger",
    "log_api_request",
]
