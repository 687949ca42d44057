"""
Google Maps Directions API binding.

This package provides typed request construction, an HTTP transport and
status-driven response interpretation for the Directions API.
"""

from .places import (
    Place,
    AddressPlace,
    CoordinatePlace,
    PlaceIdPlace,
    as_place,
)
from .types import (
    ApiStatus,
    RouteRestriction,
    TrafficModel,
    TransitMode,
    TransitRoutingPreference,
    TravelMode,
    Unit,
)
from .request import (
    DirectionsRequest,
    DirectionsRequestBuilder,
    build_directions_params,
)
from .models import DirectionsResponse, Route, Leg, Step, map_json
from .errors import (
    DirectionsError,
    TransportFailure,
    MalformedBody,
    MappingFailure,
    StatusMissing,
    ApiStatusError,
)
from .transport import Transport, TransportResult, RequestsTransport
from .interpreter import DirectionsResponseInterpreter, interpret_response
from .client import (
    DirectionsClient,
    DirectionsResult,
    create_directions_client,
    directions_from_addresses,
    directions_from_coordinates,
)

__all__ = [
    # Places
    "Place",
    "AddressPlace",
    "CoordinatePlace",
    "PlaceIdPlace",
    "as_place",
    # Options and statuses
    "ApiStatus",
    "RouteRestriction",
    "TrafficModel",
    "TransitMode",
    "TransitRoutingPreference",
    "TravelMode",
    "Unit",
    # Request building
    "DirectionsRequest",
    "DirectionsRequestBuilder",
    "build_directions_params",
    # Response schema
    "DirectionsResponse",
    "Route",
    "Leg",
    "Step",
    "map_json",
    # Errors
    "DirectionsError",
    "TransportFailure",
    "MalformedBody",
    "MappingFailure",
    "StatusMissing",
    "ApiStatusError",
    # Transport and interpretation
    "Transport",
    "TransportResult",
    "RequestsTransport",
    "DirectionsResponseInterpreter",
    "interpret_response",
    # Client
    "DirectionsClient",
    "DirectionsResult",
    "create_directions_client",
    "directions_from_addresses",
    "directions_from_coordinates",
]
