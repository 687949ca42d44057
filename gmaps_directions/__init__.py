"""
Google Maps Directions client package.

This package provides:
- Common utilities (config, logging)
- Typed Directions API request building and response interpretation
- A requests-based transport with configurable timeout and retries
"""

# Re-export key components for convenience
from .common import config, logger, get_logger
from .directions import (
    DirectionsClient,
    DirectionsRequest,
    DirectionsResponse,
    DirectionsResult,
    DirectionsError,
    create_directions_client,
    directions_from_addresses,
    directions_from_coordinates,
)

__version__ = "1.0.0"

__all__ = [
    # Configuration and logging
    "config",
    "logger",
    "get_logger",
    # Directions
    "DirectionsClient",
    "DirectionsRequest",
    "DirectionsResponse",
    "DirectionsResult",
    "DirectionsError",
    "create_directions_client",
    "directions_from_addresses",
    "directions_from_coordinates",
]
