"""
Directions request description and query parameter construction.

Turns a typed DirectionsRequest into the flat string mapping sent as the
GET query. No network I/O happens here.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, FrozenSet, Iterable, Optional, Tuple

from .places import Place
from .types import (
    RouteRestriction,
    TrafficModel,
    TransitMode,
    TransitRoutingPreference,
    TravelMode,
    Unit,
)
from ..common import config, get_logger

logger = get_logger("directions.request")
_default_logger = logger

CONFLICTING_TIMES_WARNING = (
    "Only one of arrival_time or departure_time may be specified; "
    "the request is sent as-is and may fail"
)


@dataclass(frozen=True)
class DirectionsRequest:
    """Directions API request parameters."""

    origin: Place
    destination: Place
    travel_mode: TravelMode = TravelMode.DRIVING
    waypoints: Tuple[Place, ...] = ()
    alternatives: Optional[bool] = None
    avoid: FrozenSet[RouteRestriction] = field(default_factory=frozenset)
    language: Optional[str] = None
    units: Optional[Unit] = None
    region: Optional[str] = None
    arrival_time: Optional[datetime] = None  # honoured for transit only
    departure_time: Optional[datetime] = None  # honoured for transit only
    traffic_model: Optional[TrafficModel] = None
    transit_modes: Tuple[TransitMode, ...] = ()
    transit_routing_preference: Optional[TransitRoutingPreference] = None

    def __post_init__(self):
        if not isinstance(self.origin, Place):
            raise ValueError(f"origin must be a Place, got {type(self.origin).__name__}")
        if not isinstance(self.destination, Place):
            raise ValueError(
                f"destination must be a Place, got {type(self.destination).__name__}"
            )
        # Accept wire tokens for enum options and any iterable for collections
        object.__setattr__(self, "travel_mode", _coerce(TravelMode, self.travel_mode))
        object.__setattr__(self, "units", _coerce(Unit, self.units))
        object.__setattr__(
            self, "traffic_model", _coerce(TrafficModel, self.traffic_model)
        )
        object.__setattr__(
            self,
            "transit_routing_preference",
            _coerce(TransitRoutingPreference, self.transit_routing_preference),
        )
        object.__setattr__(self, "waypoints", tuple(self.waypoints))
        object.__setattr__(
            self, "avoid", frozenset(_coerce(RouteRestriction, r) for r in self.avoid)
        )
        object.__setattr__(
            self,
            "transit_modes",
            tuple(_coerce(TransitMode, m) for m in self.transit_modes),
        )
        if self.travel_mode is None:
            raise ValueError("travel_mode is required")
        for waypoint in self.waypoints:
            if not isinstance(waypoint, Place):
                raise ValueError(f"waypoint must be a Place, got {waypoint!r}")

    @property
    def has_conflicting_times(self) -> bool:
        """Both arrival and departure time are set."""
        return self.arrival_time is not None and self.departure_time is not None

    @property
    def is_transit(self) -> bool:
        return self.travel_mode is TravelMode.TRANSIT


def _coerce(enum_cls, value):
    """Map a wire token onto its enum member; invalid tokens raise ValueError."""
    if value is None or isinstance(value, enum_cls):
        return value
    return enum_cls(value)


def to_epoch_seconds(value: datetime) -> int:
    """Convert a datetime to Unix epoch seconds; naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp())


def _join(tokens: Iterable[str]) -> str:
    return "|".join(tokens)


class DirectionsRequestBuilder:
    """Builds GET query parameters for the Directions API."""

    def __init__(
        self,
        base_params: Optional[Dict[str, str]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the builder.

        Args:
            base_params: Fixed parameters merged into every query (API key)
            logger: Logger receiving non-fatal request diagnostics
        """
        if base_params is None:
            base_params = config.directions.base_params()
        self.base_params = dict(base_params)
        self.logger = logger or _default_logger

    def build(self, request: DirectionsRequest) -> Dict[str, str]:
        """
        Assemble the query parameters for a request.

        Args:
            request: Directions request description

        Returns:
            Mapping of wire parameter names to string values
        """
        params = {
            "origin": request.origin.to_token(),
            "destination": request.destination.to_token(),
            "mode": request.travel_mode.value.lower(),
        }

        if request.waypoints:
            params["waypoints"] = _join(w.to_token() for w in request.waypoints)

        if request.alternatives is not None:
            params["alternatives"] = "true" if request.alternatives else "false"

        if request.avoid:
            params["avoid"] = _join(sorted(r.value for r in request.avoid))

        if request.language is not None:
            params["language"] = request.language

        if request.units is not None:
            params["units"] = request.units.value

        if request.region is not None:
            params["region"] = request.region

        if request.has_conflicting_times:
            self.logger.warning(
                CONFLICTING_TIMES_WARNING,
                extra={
                    "event": "invalid_request_input",
                    "travel_mode": request.travel_mode.value,
                },
            )

        if request.is_transit and request.arrival_time is not None:
            params["arrival_time"] = str(to_epoch_seconds(request.arrival_time))

        if request.is_transit and request.departure_time is not None:
            params["departure_time"] = str(to_epoch_seconds(request.departure_time))

        if request.traffic_model is not None:
            params["traffic_model"] = request.traffic_model.value

        if request.transit_modes:
            params["transit_mode"] = _join(m.value for m in request.transit_modes)

        if request.transit_routing_preference is not None:
            params["transit_routing_preference"] = (
                request.transit_routing_preference.value
            )

        return {**self.base_params, **params}


def build_directions_params(
    request: DirectionsRequest,
    base_params: Optional[Dict[str, str]] = None,
    logger: Optional[logging.Logger] = None,
) -> Dict[str, str]:
    """Build query parameters with a one-off builder."""
    return DirectionsRequestBuilder(base_params=base_params, logger=logger).build(
        request
    )
