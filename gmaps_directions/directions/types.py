"""
Enumerations for Directions API options and response statuses.

Each member's value is the exact wire token the API expects or returns.
"""

from enum import Enum
from typing import Dict


class TravelMode(Enum):
    """Mode of transport used for route calculation."""

    DRIVING = "driving"
    WALKING = "walking"
    BICYCLING = "bicycling"
    TRANSIT = "transit"


class RouteRestriction(Enum):
    """Features a route should avoid."""

    TOLLS = "tolls"
    HIGHWAYS = "highways"
    FERRIES = "ferries"
    INDOOR = "indoor"


class Unit(Enum):
    """Unit system used for displayed distances."""

    METRIC = "metric"
    IMPERIAL = "imperial"


class TrafficModel(Enum):
    """Assumptions used when calculating time in traffic."""

    BEST_GUESS = "best_guess"
    PESSIMISTIC = "pessimistic"
    OPTIMISTIC = "optimistic"


class TransitMode(Enum):
    """Preferred modes of transit."""

    BUS = "bus"
    SUBWAY = "subway"
    TRAIN = "train"
    TRAM = "tram"
    RAIL = "rail"


class TransitRoutingPreference(Enum):
    """Preferences for transit routes."""

    LESS_WALKING = "less_walking"
    FEWER_TRANSFERS = "fewer_transfers"


class ApiStatus(Enum):
    """Top-level status codes returned by the Directions API."""

    OK = "OK"
    NOT_FOUND = "NOT_FOUND"
    ZERO_RESULTS = "ZERO_RESULTS"
    MAX_WAYPOINTS_EXCEEDED = "MAX_WAYPOINTS_EXCEEDED"
    INVALID_REQUEST = "INVALID_REQUEST"
    OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"
    REQUEST_DENIED = "REQUEST_DENIED"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"

    @property
    def description(self) -> str:
        """Human-readable meaning of the status."""
        return STATUS_DESCRIPTIONS[self]

    @property
    def retryable(self) -> bool:
        """Whether the caller may reasonably retry the same request."""
        return self in (ApiStatus.OVER_QUERY_LIMIT, ApiStatus.UNKNOWN_ERROR)


STATUS_DESCRIPTIONS: Dict[ApiStatus, str] = {
    ApiStatus.OK: "The response contains a valid result.",
    ApiStatus.NOT_FOUND: (
        "At least one of the locations specified in the request's origin, "
        "destination, or waypoints could not be geocoded."
    ),
    ApiStatus.ZERO_RESULTS: (
        "No route could be found between the origin and destination."
    ),
    ApiStatus.MAX_WAYPOINTS_EXCEEDED: (
        "Too many waypoints were provided in the request. The maximum allowed "
        "number of waypoints is 23, plus the origin and destination "
        "(8 if the request does not include an API key)."
    ),
    ApiStatus.INVALID_REQUEST: (
        "Provided request was invalid. Common causes of this status include "
        "an invalid parameter or parameter value."
    ),
    ApiStatus.OVER_QUERY_LIMIT: (
        "Service has received too many requests from your application within "
        "the allowed time period."
    ),
    ApiStatus.REQUEST_DENIED: (
        "Service denied use of the directions service by your application."
    ),
    ApiStatus.UNKNOWN_ERROR: (
        "A directions request could not be processed due to a server error. "
        "The request may succeed if you try again."
    ),
}
