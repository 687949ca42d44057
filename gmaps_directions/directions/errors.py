"""
Error taxonomy for directions requests.

Errors are returned as values by the interpreter and client; callers that
prefer exceptions can raise them directly.
"""

from typing import Any, Optional

from .types import ApiStatus


class DirectionsError(Exception):
    """Base class for all directions failures."""

    kind = "DirectionsError"
    default_description = "Directions request failed"

    def __init__(self, description: Optional[str] = None, reason: Optional[str] = None):
        self.description = description or self.default_description
        self.reason = reason or None
        super().__init__(self.message)

    @property
    def message(self) -> str:
        """Description concatenated with the reason, when there is one."""
        if self.reason:
            return f"{self.description} {self.reason}"
        return self.description

    @property
    def retryable(self) -> bool:
        return False

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "kind": self.kind,
            "description": self.description,
            "reason": self.reason,
        }


class TransportFailure(DirectionsError):
    kind = "TransportFailure"
    default_description = "GET request to the directions service failed."

    def __init__(self, cause: Any = None):
        self.cause = cause
        super().__init__(reason=str(cause) if cause is not None else None)


class MalformedBody(DirectionsError):
    kind = "MalformedBody"
    default_description = "Response body is not a JSON object."


class MappingFailure(DirectionsError):
    kind = "MappingFailure"
    default_description = "Response JSON could not be mapped to a directions response."


class StatusMissing(DirectionsError):
    kind = "StatusMissing"
    default_description = "Status code not found."


class ApiStatusError(DirectionsError):
    """The service answered with a non-OK status."""

    kind = "ApiStatusError"

    def __init__(self, status: ApiStatus, message: Optional[str] = None):
        self.status = status
        super().__init__(description=status.description, reason=message)

    @property
    def retryable(self) -> bool:
        return self.status.retryable

    def to_dict(self) -> dict:
        entry = super().to_dict()
        entry["status"] = self.status.value
        return entry
