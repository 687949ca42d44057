import threading
from unittest.mock import MagicMock

import pytest

from gmaps_directions.directions import (
    AddressPlace,
    ApiStatus,
    ApiStatusError,
    DirectionsClient,
    DirectionsRequest,
    DirectionsRequestBuilder,
    DirectionsResponseInterpreter,
    TransportFailure,
    TransportResult,
    TravelMode,
    directions_from_addresses,
    directions_from_coordinates,
)
from gmaps_directions.directions import client as client_module

from .conftest import FakeTransport

ENDPOINT = "https://example.test/directions/json"


def make_client(transport, api_key="secret"):
    return DirectionsClient(
        transport=transport,
        builder=DirectionsRequestBuilder(
            base_params={"key": api_key} if api_key else {}, logger=MagicMock()
        ),
        interpreter=DirectionsResponseInterpreter(logger=MagicMock()),
        endpoint=ENDPOINT,
        max_workers=2,
    )


def test_get_directions_ok(fake_transport, simple_request):
    client = make_client(fake_transport)

    result = client.get_directions(simple_request)

    assert result.ok
    assert result.response.status is ApiStatus.OK
    assert result.response.routes == []
    assert result.raise_for_error() is result.response
    assert fake_transport.calls == [
        (
            ENDPOINT,
            {"key": "secret", "origin": "A", "destination": "B", "mode": "driving"},
        )
    ]


def test_transport_called_exactly_once_on_error(simple_request):
    transport = FakeTransport(TransportResult(success=False, error=OSError("down")))
    client = make_client(transport)

    response, error = client.get_directions(simple_request)

    assert response is None
    assert isinstance(error, TransportFailure)
    assert len(transport.calls) == 1


def test_raise_for_error_raises_api_status(simple_request):
    transport = FakeTransport(
        TransportResult(
            success=True, body={"status": "OVER_QUERY_LIMIT", "error_message": "quota"}
        )
    )
    result = make_client(transport).get_directions(simple_request)

    with pytest.raises(ApiStatusError) as exc_info:
        result.raise_for_error()
    assert exc_info.value.status is ApiStatus.OVER_QUERY_LIMIT
    assert "quota" in str(exc_info.value)


def test_async_returns_future_and_calls_completion(fake_transport, simple_request):
    done = threading.Event()
    received = {}

    def completion(response, error):
        received["response"] = response
        received["error"] = error
        done.set()

    with make_client(fake_transport) as client:
        future = client.get_directions_async(simple_request, completion)
        result = future.result(timeout=5)
        assert done.wait(timeout=5)

    assert result.ok
    assert received["error"] is None
    assert received["response"].status is ApiStatus.OK


def test_concurrent_calls_are_independent():
    transport = FakeTransport()
    with make_client(transport) as client:
        futures = [client.get_directions_async(_request(i)) for i in range(6)]
        results = [f.result(timeout=5) for f in futures]

    assert all(r.ok for r in results)
    origins = sorted(params["origin"] for _, params in transport.calls)
    assert origins == sorted(f"Origin {i}" for i in range(6))


def _request(i):
    return DirectionsRequest(
        origin=AddressPlace(f"Origin {i}"), destination=AddressPlace("B")
    )


def test_directions_accepts_place_like_values(fake_transport):
    client = make_client(fake_transport, api_key=None)

    client.directions(
        "Toronto",
        (45.5, -73.57),
        travel_mode=TravelMode.WALKING,
        waypoints=["Kingston, ON"],
        language="en",
    )

    _, params = fake_transport.calls[0]
    assert params == {
        "origin": "Toronto",
        "destination": "45.5,-73.57",
        "mode": "walking",
        "waypoints": "Kingston, ON",
        "language": "en",
    }


def test_convenience_functions(fake_transport):
    client = make_client(fake_transport, api_key=None)

    directions_from_addresses("A", "B", client=client)
    directions_from_coordinates((1.0, 2.0), (3.0, 4.0), client=client)

    assert fake_transport.calls[0][1]["origin"] == "A"
    assert fake_transport.calls[1][1]["origin"] == "1.0,2.0"
    assert fake_transport.calls[1][1]["destination"] == "3.0,4.0"


def test_service_info(fake_transport):
    info = make_client(fake_transport).get_service_info()
    assert info["endpoint"] == ENDPOINT
    assert info["has_api_key"] is True
    assert info["transport"] == "FakeTransport"


class RaisingTransport:
    def perform_get(self, url, params):
        raise RuntimeError("transport blew up")


def test_async_completion_receives_transport_failure_when_call_raises(simple_request):
    done = threading.Event()
    received = {}

    def completion(response, error):
        received["response"] = response
        received["error"] = error
        done.set()

    with make_client(RaisingTransport()) as client:
        future = client.get_directions_async(simple_request, completion)
        assert done.wait(timeout=5)
        assert isinstance(future.exception(timeout=5), RuntimeError)

    assert received["response"] is None
    assert isinstance(received["error"], TransportFailure)
    assert "transport blew up" in str(received["error"])


class BlockingTransport(FakeTransport):
    def __init__(self):
        super().__init__()
        self.release = threading.Event()

    def perform_get(self, url, params):
        self.release.wait(timeout=5)
        return super().perform_get(url, params)


def test_cancelled_request_still_calls_completion(simple_request):
    transport = BlockingTransport()
    client = DirectionsClient(
        transport=transport,
        builder=DirectionsRequestBuilder(base_params={}, logger=MagicMock()),
        interpreter=DirectionsResponseInterpreter(logger=MagicMock()),
        endpoint=ENDPOINT,
        max_workers=1,
    )
    completion = MagicMock()

    try:
        running = client.get_directions_async(simple_request)
        queued = client.get_directions_async(simple_request, completion)

        assert queued.cancel()
        completion.assert_called_once()
        response, error = completion.call_args[0]
        assert response is None
        assert isinstance(error, TransportFailure)
    finally:
        transport.release.set()
        client.close()

    assert running.result(timeout=5).ok


def test_convenience_function_closes_temporary_client(monkeypatch, fake_transport):
    fake_transport.close = MagicMock()
    monkeypatch.setattr(
        client_module,
        "create_directions_client",
        lambda: make_client(fake_transport, api_key=None),
    )

    result = directions_from_addresses("A", "B")
    directions_from_coordinates((1.0, 2.0), (3.0, 4.0))

    assert result.ok
    assert fake_transport.close.call_count == 2
