"""
Typed Directions API response schema.

Pydantic models mirroring the wire JSON. Unknown fields are ignored so that
additions to the API do not break mapping.
"""

from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar

import polyline
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .types import ApiStatus
from ..common import get_logger

logger = get_logger("directions.models")

ModelT = TypeVar("ModelT", bound=BaseModel)


class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class LatLng(_WireModel):
    lat: float
    lng: float


class Bounds(_WireModel):
    northeast: LatLng
    southwest: LatLng


class TextValue(_WireModel):
    """Distance or duration: display text plus value in metres / seconds."""

    text: Optional[str] = None
    value: Optional[float] = None


class TimeValue(_WireModel):
    text: Optional[str] = None
    time_zone: Optional[str] = None
    value: Optional[int] = None


class Polyline(_WireModel):
    points: str = ""

    def decode(self, precision: int = 5) -> List[Tuple[float, float]]:
        """Decode the encoded polyline into (lat, lng) pairs."""
        if not self.points:
            return []
        return polyline.decode(self.points, precision)


class TransitStop(_WireModel):
    name: Optional[str] = None
    location: Optional[LatLng] = None


class TransitDetails(_WireModel):
    arrival_stop: Optional[TransitStop] = None
    departure_stop: Optional[TransitStop] = None
    arrival_time: Optional[TimeValue] = None
    departure_time: Optional[TimeValue] = None
    headsign: Optional[str] = None
    headway: Optional[int] = None
    num_stops: Optional[int] = None
    line: Dict[str, Any] = Field(default_factory=dict)


class Step(_WireModel):
    html_instructions: Optional[str] = None
    distance: Optional[TextValue] = None
    duration: Optional[TextValue] = None
    start_location: Optional[LatLng] = None
    end_location: Optional[LatLng] = None
    polyline: Optional[Polyline] = None
    travel_mode: Optional[str] = None
    maneuver: Optional[str] = None
    transit_details: Optional[TransitDetails] = None
    steps: List["Step"] = Field(default_factory=list)


class Leg(_WireModel):
    steps: List[Step] = Field(default_factory=list)
    distance: Optional[TextValue] = None
    duration: Optional[TextValue] = None
    duration_in_traffic: Optional[TextValue] = None
    arrival_time: Optional[TimeValue] = None
    departure_time: Optional[TimeValue] = None
    start_location: Optional[LatLng] = None
    end_location: Optional[LatLng] = None
    start_address: Optional[str] = None
    end_address: Optional[str] = None
    via_waypoint: List[Dict[str, Any]] = Field(default_factory=list)


class Fare(_WireModel):
    currency: Optional[str] = None
    value: Optional[float] = None
    text: Optional[str] = None


class Route(_WireModel):
    summary: Optional[str] = None
    legs: List[Leg] = Field(default_factory=list)
    waypoint_order: List[int] = Field(default_factory=list)
    overview_polyline: Optional[Polyline] = None
    bounds: Optional[Bounds] = None
    copyrights: Optional[str] = None
    warnings: List[str] = Field(default_factory=list)
    fare: Optional[Fare] = None

    @property
    def distance_m(self) -> float:
        """Total distance across all legs in metres."""
        return sum(
            leg.distance.value or 0.0 for leg in self.legs if leg.distance is not None
        )

    @property
    def duration_s(self) -> float:
        """Total duration across all legs in seconds."""
        return sum(
            leg.duration.value or 0.0 for leg in self.legs if leg.duration is not None
        )


class GeocodedWaypoint(_WireModel):
    geocoder_status: Optional[str] = None
    place_id: Optional[str] = None
    types: List[str] = Field(default_factory=list)
    partial_match: Optional[bool] = None


class DirectionsResponse(_WireModel):
    """Top-level Directions API response."""

    status: Optional[ApiStatus] = None
    error_message: Optional[str] = None
    routes: List[Route] = Field(default_factory=list)
    geocoded_waypoints: List[GeocodedWaypoint] = Field(default_factory=list)
    available_travel_modes: List[str] = Field(default_factory=list)

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, v):
        """Unrecognized status strings map to None rather than failing."""
        if v is None or isinstance(v, ApiStatus):
            return v
        try:
            return ApiStatus(v)
        except ValueError:
            return None


def map_json(schema: Type[ModelT], data: Any) -> Optional[ModelT]:
    """
    Materialize a schema from a decoded JSON tree.

    Args:
        schema: Pydantic model class
        data: Decoded JSON value

    Returns:
        Model instance, or None when the JSON does not match the schema
    """
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        logger.debug(
            f"Failed to map JSON onto {schema.__name__}",
            extra={"event": "mapping_failed", "errors": e.error_count()},
        )
        return None
