"""
HTTP transport for the Directions API.

The transport performs exactly one logical GET per directions request and
reports the outcome as a TransportResult. Timeouts and retries are transport
configuration; the request builder and interpreter never retry.
"""

import time
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol

import requests
from requests.adapters import HTTPAdapter
from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from urllib3.util.retry import Retry

from ..common import config, get_logger, log_api_request

logger = get_logger("directions.transport")


@dataclass(frozen=True)
class TransportResult:
    """Outcome of a GET request."""

    success: bool
    body: Any = None  # decoded JSON, raw text, or None for no content
    error: Any = None
    status_code: Optional[int] = None


class Transport(Protocol):
    """Protocol for HTTP transports."""

    def perform_get(self, url: str, params: Dict[str, str]) -> TransportResult:
        """Issue a GET request and report the outcome."""
        ...


class RequestsTransport:
    """Transport backed by a requests session."""

    def __init__(
        self,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        backoff_factor: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the transport.

        Args:
            timeout: Request timeout in seconds
            max_retries: Retry attempts after the first try (0 disables retries)
            backoff_factor: Exponential backoff factor between retries
            session: Preconfigured session, mainly for tests
        """
        self.timeout = timeout if timeout is not None else config.directions.timeout_seconds
        self.max_retries = (
            max_retries if max_retries is not None else config.directions.max_retries
        )
        self.backoff_factor = (
            backoff_factor
            if backoff_factor is not None
            else config.directions.backoff_factor
        )

        self.session = session or self._create_session()
        self.logger = logger

    def _create_session(self) -> requests.Session:
        """Create requests session with retry strategy."""
        session = requests.Session()

        # Status retries only; connection and read errors are retried by _get
        retry_strategy = Retry(
            total=None,
            connect=0,
            read=0,
            other=0,
            status=self.max_retries,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET"],
            backoff_factor=self.backoff_factor,
            raise_on_status=False,
        )

        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session

    def _get(self, url: str, params: Dict[str, str]) -> requests.Response:
        """GET with connection-level retries."""
        retrying = Retrying(
            stop=stop_after_attempt(self.max_retries + 1),
            wait=wait_exponential(multiplier=self.backoff_factor, min=0, max=10),
            retry=retry_if_exception_type(
                (requests.ConnectionError, requests.Timeout)
            ),
            reraise=True,
        )
        for attempt in retrying:
            with attempt:
                response = self.session.get(url, params=params, timeout=self.timeout)
        return response

    def perform_get(self, url: str, params: Dict[str, str]) -> TransportResult:
        """
        Issue the GET request.

        Args:
            url: Endpoint URL
            params: Query parameters

        Returns:
            TransportResult with the decoded body or the failure cause
        """
        start_time = time.time()

        try:
            response = self._get(url, params)
            duration_ms = (time.time() - start_time) * 1000

            response.raise_for_status()

        except requests.exceptions.RequestException as e:
            duration_ms = (time.time() - start_time) * 1000
            status_code = getattr(getattr(e, "response", None), "status_code", None)

            self.logger.error(
                f"Directions request failed: {e}",
                extra=log_api_request(
                    endpoint=url,
                    status_code=status_code,
                    duration_ms=duration_ms,
                    error=str(e),
                ),
            )
            return TransportResult(success=False, error=e, status_code=status_code)

        body = self._decode_body(response)

        self.logger.debug(
            "Directions request completed",
            extra=log_api_request(
                endpoint=url,
                status_code=response.status_code,
                duration_ms=duration_ms,
            ),
        )

        return TransportResult(
            success=True, body=body, status_code=response.status_code
        )

    @staticmethod
    def _decode_body(response: requests.Response) -> Any:
        """Decode JSON; empty bodies are no content and non-JSON bodies stay text."""
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    def close(self):
        self.session.close()
