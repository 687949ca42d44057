"""
Google Maps Directions client.

Wires the request builder, the injected transport and the response
interpreter together. Each call builds its own parameters and receives its
own result, so one client can serve concurrent callers.
"""

from concurrent.futures import CancelledError, Future, ThreadPoolExecutor
from typing import Any, Callable, Dict, Iterable, NamedTuple, Optional, Tuple
from urllib.parse import urlencode

from .errors import DirectionsError, TransportFailure
from .interpreter import DirectionsResponseInterpreter
from .models import DirectionsResponse
from .places import CoordinatePlace, PlaceLike, as_place
from .request import DirectionsRequest, DirectionsRequestBuilder
from .transport import RequestsTransport, Transport
from .types import TravelMode
from ..common import config, get_logger, TimedLogger

logger = get_logger("directions.client")

Completion = Callable[[Optional[DirectionsResponse], Optional[DirectionsError]], Any]


class DirectionsResult(NamedTuple):
    """Response and error pair for a single directions call."""

    response: Optional[DirectionsResponse]
    error: Optional[DirectionsError]

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> Optional[DirectionsResponse]:
        """Raise the error, if any, otherwise return the response."""
        if self.error is not None:
            raise self.error
        return self.response


class DirectionsClient:
    """Client for the Google Maps Directions API."""

    def __init__(
        self,
        transport: Optional[Transport] = None,
        builder: Optional[DirectionsRequestBuilder] = None,
        interpreter: Optional[DirectionsResponseInterpreter] = None,
        endpoint: Optional[str] = None,
        max_workers: Optional[int] = None,
    ):
        """
        Initialize the directions client.

        Args:
            transport: HTTP transport performing the GET request
            builder: Query parameter builder (carries the API key)
            interpreter: Response interpreter
            endpoint: Directions endpoint URL including output format
            max_workers: Worker threads for asynchronous requests
        """
        self.transport = transport or RequestsTransport()
        self.builder = builder or DirectionsRequestBuilder()
        self.interpreter = interpreter or DirectionsResponseInterpreter()
        self.endpoint = endpoint or config.directions.endpoint
        self.max_workers = max_workers or config.directions.max_workers

        self._executor: Optional[ThreadPoolExecutor] = None

        self.logger = logger

    def get_directions(self, request: DirectionsRequest) -> DirectionsResult:
        """
        Request directions.

        Args:
            request: Directions request description

        Returns:
            DirectionsResult with the typed response and/or classified error
        """
        params = self.builder.build(request)

        self.logger.debug(
            f"GET {self.endpoint}?{urlencode(_redact(params))}",
            extra={"event": "directions_request"},
        )

        with TimedLogger(
            self.logger,
            f"get_directions {request.origin} -> {request.destination}",
            travel_mode=request.travel_mode.value,
            waypoints=len(request.waypoints),
        ):
            result = self.transport.perform_get(self.endpoint, params)
            response, error = self.interpreter.interpret(result)

        return DirectionsResult(response, error)

    def get_directions_async(
        self, request: DirectionsRequest, completion: Optional[Completion] = None
    ) -> "Future[DirectionsResult]":
        """
        Request directions on a worker thread.

        Args:
            request: Directions request description
            completion: Optional callback invoked with (response, error). A
                request that raises or is cancelled reports TransportFailure

        Returns:
            Future resolving to a DirectionsResult
        """
        future = self._get_executor().submit(self.get_directions, request)

        if completion is not None:

            def _done(f: "Future[DirectionsResult]"):
                # The callback always fires; failures arrive as TransportFailure
                if f.cancelled():
                    completion(None, TransportFailure(CancelledError()))
                    return
                exc = f.exception()
                if exc is not None:
                    self.logger.error(f"Directions request raised: {exc}")
                    completion(None, TransportFailure(exc))
                    return
                response, error = f.result()
                completion(response, error)

            future.add_done_callback(_done)

        return future

    def directions(
        self,
        origin: PlaceLike,
        destination: PlaceLike,
        travel_mode: TravelMode = TravelMode.DRIVING,
        waypoints: Iterable[PlaceLike] = (),
        **options,
    ) -> DirectionsResult:
        """Request directions from address strings, (lat, lng) tuples or places."""
        request = DirectionsRequest(
            origin=as_place(origin),
            destination=as_place(destination),
            travel_mode=travel_mode,
            waypoints=tuple(as_place(w) for w in waypoints),
            **options,
        )
        return self.get_directions(request)

    def get_service_info(self) -> Dict[str, Any]:
        """
        Get directions service information.

        Returns:
            Service metadata
        """
        return {
            "provider": "google",
            "endpoint": self.endpoint,
            "transport": type(self.transport).__name__,
            "max_workers": self.max_workers,
            "has_api_key": "key" in self.builder.base_params,
        }

    def _get_executor(self) -> ThreadPoolExecutor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self.max_workers, thread_name_prefix="directions"
            )
        return self._executor

    def close(self):
        """Shut down worker threads and the transport session."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
        close = getattr(self.transport, "close", None)
        if callable(close):
            close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def _redact(params: Dict[str, str]) -> Dict[str, str]:
    if "key" in params:
        return {**params, "key": "***"}
    return params


# Convenience functions
def create_directions_client() -> DirectionsClient:
    """Create directions client with default configuration."""
    return DirectionsClient()


def directions_from_addresses(
    origin_address: str,
    destination_address: str,
    client: Optional[DirectionsClient] = None,
    **options,
) -> DirectionsResult:
    """Request directions between two address descriptions."""
    if client is not None:
        return client.directions(origin_address, destination_address, **options)
    with create_directions_client() as client:
        return client.directions(origin_address, destination_address, **options)


def directions_from_coordinates(
    origin: Tuple[float, float],
    destination: Tuple[float, float],
    client: Optional[DirectionsClient] = None,
    **options,
) -> DirectionsResult:
    """Request directions between two (lat, lng) coordinates."""
    origin_place = CoordinatePlace(*origin)
    destination_place = CoordinatePlace(*destination)
    if client is not None:
        return client.directions(origin_place, destination_place, **options)
    with create_directions_client() as client:
        return client.directions(origin_place, destination_place, **options)
