"""
Location references accepted by the Directions API.

A place is an address, a latitude/longitude coordinate or a Google place ID,
and always serializes to a single query token.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple, Union

PLACE_ID_PREFIX = "place_id:"

_COORDINATE_PATTERN = re.compile(
    r"^\s*([-+]?\d+(?:\.\d+)?(?:[eE][-+]?\d+)?)\s*,"
    r"\s*([-+]?\d+(?:\.\d+)?(?:[eE][-+]?\d+)?)\s*$"
)


class Place(ABC):
    """Base class for location references."""

    @abstractmethod
    def to_token(self) -> str:
        """Serialize to the query token the API expects."""

    def __str__(self) -> str:
        return self.to_token()

    @staticmethod
    def from_token(token: str) -> "Place":
        """
        Parse a query token back into a place.

        Args:
            token: Serialized place ("place_id:<id>", "lat,lng" or address text)

        Returns:
            The matching place variant
        """
        if not isinstance(token, str) or not token.strip():
            raise ValueError("Place token must be a non-empty string")

        if token.startswith(PLACE_ID_PREFIX):
            return PlaceIdPlace(token[len(PLACE_ID_PREFIX) :])

        match = _COORDINATE_PATTERN.match(token)
        if match:
            return CoordinatePlace(float(match.group(1)), float(match.group(2)))

        return AddressPlace(token)


@dataclass(frozen=True)
class AddressPlace(Place):
    """Free-text address, geocoded by the service."""

    address: str

    def __post_init__(self):
        if not self.address or not self.address.strip():
            raise ValueError("Address must not be empty")

    def to_token(self) -> str:
        return self.address


@dataclass(frozen=True)
class CoordinatePlace(Place):
    """Geographic coordinate in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self):
        object.__setattr__(self, "latitude", float(self.latitude))
        object.__setattr__(self, "longitude", float(self.longitude))
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"Latitude out of range: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"Longitude out of range: {self.longitude}")

    def to_token(self) -> str:
        return f"{_decimal_text(self.latitude)},{_decimal_text(self.longitude)}"


@dataclass(frozen=True)
class PlaceIdPlace(Place):
    """Opaque Google place identifier."""

    place_id: str

    def __post_init__(self):
        if not self.place_id or not self.place_id.strip():
            raise ValueError("Place ID must not be empty")

    def to_token(self) -> str:
        return f"{PLACE_ID_PREFIX}{self.place_id}"


def _decimal_text(value: float) -> str:
    """Shortest round-tripping text for a float, never in exponent notation."""
    return format(Decimal(repr(value)), "f")


PlaceLike = Union[Place, str, Tuple[float, float]]


def as_place(value: PlaceLike) -> Place:
    """Coerce an address string or (lat, lng) tuple into a place."""
    if isinstance(value, Place):
        return value
    if isinstance(value, str):
        return AddressPlace(value)
    if isinstance(value, tuple) and len(value) == 2:
        return CoordinatePlace(float(value[0]), float(value[1]))
    raise ValueError(f"Cannot interpret {value!r} as a place")
