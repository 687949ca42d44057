import importlib.util
from datetime import datetime
from pathlib import Path

from gmaps_directions.directions import (
    AddressPlace,
    CoordinatePlace,
    PlaceIdPlace,
    RouteRestriction,
    TravelMode,
)

_SCRIPT = Path(__file__).parent.parent / "scripts" / "fetch_directions.py"
_spec = importlib.util.spec_from_file_location("fetch_directions", _SCRIPT)
fetch_directions = importlib.util.module_from_spec(_spec)
_spec.loader.exec_module(fetch_directions)


def test_build_request_from_arguments():
    args = fetch_directions.parse_arguments(
        [
            "43.65,-79.38",
            "place_id:abc",
            "--mode",
            "transit",
            "--waypoints",
            "Kingston, ON",
            "--avoid",
            "tolls,ferries",
            "--departure-time",
            "2024-01-01T08:00",
        ]
    )

    request = fetch_directions.build_request(args)

    assert request.origin == CoordinatePlace(43.65, -79.38)
    assert request.destination == PlaceIdPlace("abc")
    assert request.travel_mode is TravelMode.TRANSIT
    assert request.waypoints == (AddressPlace("Kingston, ON"),)
    assert request.avoid == {RouteRestriction.TOLLS, RouteRestriction.FERRIES}
    assert request.departure_time == datetime(2024, 1, 1, 8, 0)
    assert request.alternatives is None
