"""
Amtraker API manager for fetching train and station data.

This module handles all communication with the Amtraker API: issuing GET
requests against the four read-only endpoints and decoding the JSON bodies
into the typed models. Failures are raised to the caller without retry.
"""

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, TypeVar
from urllib.parse import quote

import aiohttp

from ..managers.config_manager import AmtrakerConfig
from ..models.station_data import StationResponse
from ..models.train_data import TrainResponse
from ..version import __api_url__, get_user_agent

logger = logging.getLogger(__name__)

BASE_API_URL = __api_url__

T = TypeVar("T")


class AmtrakAPIException(Exception):
    """Base exception for Amtraker API-related errors."""

    pass


class AmtrakNetworkException(AmtrakAPIException):
    """Exception for network-related errors."""

    pass


class AmtrakDataException(AmtrakAPIException):
    """Exception for response bodies that cannot be decoded."""

    pass


class AmtrakResponseException(AmtrakAPIException):
    """Exception for error status codes returned by the API."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code


@dataclass
class AmtrakAPIResponse:
    """Container for raw API response data."""

    status_code: int
    data: Any
    text: str = ""


class HTTPClient(ABC):
    """Abstract HTTP client interface for dependency injection."""

    @abstractmethod
    async def get(self, url: str, params: Optional[Dict] = None) -> AmtrakAPIResponse:
        """Make HTTP GET request."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close HTTP client."""
        pass

    @abstractmethod
    def close_sync(self) -> None:
        """Close HTTP client synchronously."""
        pass


class AioHttpClient(HTTPClient):
    """
    Concrete HTTP client implementation using aiohttp.

    The session is created lazily on the first request and reused until
    the client is closed.
    """

    def __init__(self, timeout_seconds: int = 10, user_agent: Optional[str] = None):
        """Initialize HTTP client with timeout and User-Agent."""
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._user_agent = user_agent or get_user_agent()
        self._session: Optional[aiohttp.ClientSession] = None

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self._timeout,
                headers={"User-Agent": self._user_agent, "Accept": "application/json"},
            )
        return self._session

    async def get(self, url: str, params: Optional[Dict] = None) -> AmtrakAPIResponse:
        """
        Make HTTP GET request.

        The body is only parsed as JSON for successful responses; error
        responses keep their raw text.

        Raises:
            AmtrakNetworkException: If the request could not be completed
            AmtrakDataException: If a successful response is not valid JSON
        """
        session = await self._ensure_session()

        try:
            async with session.get(url, params=params) as response:
                status = response.status
                text = await response.text()
        except aiohttp.ClientError as e:
            raise AmtrakNetworkException(f"Network error: {e}")
        except asyncio.TimeoutError:
            raise AmtrakNetworkException(f"Request to {url} timed out")
        except UnicodeDecodeError as e:
            raise AmtrakDataException(f"Response body is not valid text: {e}")

        if status != 200:
            return AmtrakAPIResponse(
                status_code=status,
                data=None,
                text=text,
            )

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise AmtrakDataException(f"Invalid JSON response: {e}")

        return AmtrakAPIResponse(
            status_code=status,
            data=data,
            text=text,
        )

    async def close(self) -> None:
        """Close HTTP client."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    def close_sync(self) -> None:
        """Close HTTP client synchronously (for shutdown)."""
        if not self._session or self._session.closed:
            self._session = None
            return

        session = self._session
        self._session = None
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        try:
            if loop is not None:
                # Inside a running loop the close can only be scheduled
                loop.create_task(session.close())
            else:
                asyncio.run(session.close())
            logger.debug("HTTP client session closed properly")
        except RuntimeError as e:
            logger.warning(f"Error closing session: {e}")


class AmtrakClient:
    """
    Client for the Amtraker API.

    Exposes the four read-only endpoints. Each call issues one GET request
    and returns a freshly decoded snapshot owned by the caller.
    """

    def __init__(
        self,
        base_url: str = BASE_API_URL,
        http_client: Optional[HTTPClient] = None,
        timeout_seconds: int = 10,
    ):
        """
        Initialize the client.

        Args:
            base_url: Base url of the endpoint the client queries
            http_client: HTTP transport, an aiohttp client when None
            timeout_seconds: Request timeout for the default transport
        """
        self._base_url = base_url.rstrip("/")
        self._http_client = http_client or AioHttpClient(timeout_seconds=timeout_seconds)
        logger.debug(f"AmtrakClient initialized for {self._base_url}")

    @classmethod
    def with_base_url(cls, base_url: str) -> "AmtrakClient":
        """Create a client for another endpoint, e.g. a local test server."""
        return cls(base_url=base_url)

    @property
    def base_url(self) -> str:
        """Get the base url the client queries."""
        return self._base_url

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def trains(self) -> TrainResponse:
        """
        Get all trains currently tracked.

        Calls the `/trains` endpoint.

        Returns:
            TrainResponse: Trains keyed by train number

        Raises:
            AmtrakAPIException: For network, status or decoding errors
        """
        return await self._fetch("trains", TrainResponse.from_payload)

    async def train(self, train_identifier: str) -> TrainResponse:
        """
        Get the train(s) matching an identifier.

        Calls the `/trains/{train_identifier}` endpoint.

        Args:
            train_identifier: Either a train id such as "612-5" or a train
                number such as "612"

        Returns:
            TrainResponse: Matching trains, empty when the train is not
            currently in the network
        """
        path = f"trains/{self._quote_segment(train_identifier, 'Train identifier')}"
        return await self._fetch(path, TrainResponse.from_payload)

    async def stations(self) -> StationResponse:
        """
        Get all stations in the network.

        Calls the `/stations` endpoint.
        """
        return await self._fetch("stations", StationResponse.from_payload)

    async def station(self, station_code: str) -> StationResponse:
        """
        Get the station with the given code.

        Calls the `/stations/{station_code}` endpoint.

        Args:
            station_code: Station code such as "PHL"

        Returns:
            StationResponse: The station keyed by its code, empty when unknown
        """
        path = f"stations/{self._quote_segment(station_code, 'Station code')}"
        return await self._fetch(path, StationResponse.from_payload)

    async def _fetch(self, path: str, decode: Callable[[Any], T]) -> T:
        """Issue a GET for an endpoint path and decode the body."""
        url = f"{self._base_url}/{path}"
        logger.debug(f"Fetching {url}")

        response = await self._http_client.get(url)

        if response.status_code != 200:
            logger.error(f"{url} returned status {response.status_code}")
            raise AmtrakResponseException(
                response.status_code,
                f"API returned an error response: {response.status_code} - "
                f"{response.text[:200]}",
            )

        try:
            result = decode(response.data)
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Failed to decode response from {url}: {e}")
            raise AmtrakDataException(f"Unable to deserialize the received value: {e}")

        logger.info(f"Decoded {len(result)} entries from /{path}")
        return result

    @staticmethod
    def _quote_segment(value: str, label: str) -> str:
        """Quote a caller supplied path segment."""
        if not value or not value.strip():
            raise ValueError(f"{label} cannot be empty")
        return quote(value.strip(), safe="")

    async def close(self) -> None:
        """Close the client and release the HTTP session."""
        await self._http_client.close()
        logger.debug("AmtrakClient closed")

    def close_sync(self) -> None:
        """Close the client synchronously."""
        self._http_client.close_sync()


class AmtrakAPIFactory:
    """
    Factory for creating Amtraker clients.

    Implements Factory pattern for easy instantiation.
    """

    @staticmethod
    def create_client(config: AmtrakerConfig) -> AmtrakClient:
        """Create a client from configuration."""
        http_client = AioHttpClient(
            timeout_seconds=config.timeout_seconds,
            user_agent=config.user_agent,
        )
        return AmtrakClient(base_url=config.base_url, http_client=http_client)

    @staticmethod
    def create_default_client() -> AmtrakClient:
        """Create a client for the public API."""
        return AmtrakAPIFactory.create_client(AmtrakerConfig())
