"""
Directions response interpretation.

Maps a TransportResult onto a (response, error) pair following the service's
status field. Nothing is raised here; every failure comes back as a
DirectionsError value.
"""

import logging
from typing import Optional, Tuple

from .errors import (
    ApiStatusError,
    DirectionsError,
    MalformedBody,
    MappingFailure,
    StatusMissing,
    TransportFailure,
)
from .models import DirectionsResponse, map_json
from .transport import TransportResult
from .types import ApiStatus
from ..common import get_logger

logger = get_logger("directions.interpreter")
_default_logger = logger

Interpretation = Tuple[Optional[DirectionsResponse], Optional[DirectionsError]]


class DirectionsResponseInterpreter:
    """Turns raw transport results into typed responses and errors."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or _default_logger

    def interpret(self, result: TransportResult) -> Interpretation:
        """
        Interpret a transport result.

        Args:
            result: Raw outcome of the GET request

        Returns:
            (response, error). The response is kept alongside an ApiStatusError
            so callers can inspect partial data.
        """
        if not result.success:
            self.logger.warning(
                "Directions GET failed", extra={"event": "transport_failure"}
            )
            return None, TransportFailure(result.error)

        if result.body is None:
            return DirectionsResponse(), None

        if not isinstance(result.body, dict):
            self.logger.warning(
                "Directions response body is not a JSON object",
                extra={"event": "malformed_body", "body_type": type(result.body).__name__},
            )
            return None, MalformedBody()

        response = map_json(DirectionsResponse, result.body)
        if response is None:
            self.logger.warning(
                "Mapping directions response failed",
                extra={"event": "mapping_failure"},
            )
            return None, MappingFailure()

        if response.status is None:
            self.logger.warning(
                "Directions response has no recognized status",
                extra={"event": "status_missing", "raw_status": result.body.get("status")},
            )
            return None, StatusMissing()

        if response.status is ApiStatus.OK:
            return response, None

        self.logger.info(
            f"Directions API returned {response.status.value}",
            extra={
                "event": "api_status_error",
                "api_status": response.status.value,
                "error_message": response.error_message,
            },
        )
        return response, ApiStatusError(response.status, response.error_message)


def interpret_response(result: TransportResult) -> Interpretation:
    """Interpret a transport result with a default interpreter."""
    return DirectionsResponseInterpreter().interpret(result)
