import pytest

from gmaps_directions.directions import (
    AddressPlace,
    DirectionsRequest,
    TransportResult,
)


class FakeTransport:
    """Records GET calls and replays a canned result."""

    def __init__(self, result=None):
        self.result = result or TransportResult(
            success=True, body={"status": "OK", "routes": []}
        )
        self.calls = []

    def perform_get(self, url, params):
        self.calls.append((url, dict(params)))
        return self.result


@pytest.fixture
def fake_transport():
    return FakeTransport()


@pytest.fixture
def simple_request():
    return DirectionsRequest(origin=AddressPlace("A"), destination=AddressPlace("B"))


@pytest.fixture
def route_body():
    return {
        "status": "OK",
        "geocoded_waypoints": [
            {"geocoder_status": "OK", "place_id": "ChIJpTvG15DL1IkRd8S0KlBVNTI"},
            {"geocoder_status": "OK", "place_id": "ChIJDbdkHFQayUwR7-8fITgxTmU"},
        ],
        "routes": [
            {
                "summary": "ON-401 E",
                "bounds": {
                    "northeast": {"lat": 45.5, "lng": -73.5},
                    "southwest": {"lat": 43.6, "lng": -79.4},
                },
                "copyrights": "Map data ©2024 Google",
                "overview_polyline": {"points": "_p~iF~ps|U_ulLnnqC_mqNvxq`@"},
                "warnings": [],
                "waypoint_order": [],
                "legs": [
                    {
                        "distance": {"text": "541 km", "value": 541000},
                        "duration": {"text": "5 hours 20 mins", "value": 19200},
                        "start_address": "Toronto, ON, Canada",
                        "end_address": "Montreal, QC, Canada",
                        "start_location": {"lat": 43.65, "lng": -79.38},
                        "end_location": {"lat": 45.5, "lng": -73.57},
                        "steps": [
                            {
                                "html_instructions": "Head <b>east</b>",
                                "distance": {"text": "0.2 km", "value": 200},
                                "duration": {"text": "1 min", "value": 40},
                                "start_location": {"lat": 43.65, "lng": -79.38},
                                "end_location": {"lat": 43.651, "lng": -79.378},
                                "polyline": {"points": "_p~iF~ps|U"},
                                "travel_mode": "DRIVING",
                            }
                        ],
                        "via_waypoint": [],
                    }
                ],
            }
        ],
    }
