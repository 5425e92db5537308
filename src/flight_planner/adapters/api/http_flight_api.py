"""
HTTP Flight Search API - JSON backend adapter.

Talks to the flight backend over HTTP using an async httpx client.
Every call carries an explicit timeout; failures are raised as
FlightApiError and never retried here.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from src.flight_planner.adapters.api.payloads import (
    SearchRequestBody,
    parse_flights,
    parse_itineraries,
)
from src.flight_planner.config import ApiConfig
from src.flight_planner.exceptions import FlightApiError, InvalidResponseError
from src.flight_planner.ports.flight_search_api import FlightSearchApi
from src.flight_planner.schemas.flight import FlightLeg
from src.flight_planner.schemas.itinerary import Itinerary
from src.flight_planner.schemas.search import SearchCriteria

logger = logging.getLogger(__name__)


class HttpFlightSearchApi(FlightSearchApi):
    """
    Flight backend reached through GET /flights and POST /search.

    Attributes:
        _config: Connection settings (base URL, timeouts).
        _transport: Optional custom httpx transport (used by tests).
        _client: Lazily created async HTTP client.
    """

    def __init__(
        self,
        config: Optional[ApiConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize the adapter.

        Args:
            config: API config. If None, uses defaults from the environment.
            transport: Custom transport passed to httpx.AsyncClient.
        """
        self._config = config or ApiConfig()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def name(self) -> str:
        return f"Flight API ({self.base_url})"

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers={
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                },
                timeout=httpx.Timeout(
                    self._config.request_timeout_s,
                    connect=self._config.connect_timeout_s,
                ),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        """
        Send one request and return the decoded JSON body.

        Raises:
            FlightApiError: Transport error (status -1) or non-2xx status.
            InvalidResponseError: Body is not valid JSON.
        """
        client = await self._get_client()
        logger.info("Requesting %s %s%s", method, self.base_url, path)

        try:
            response = await client.request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            logger.error("Timeout on %s %s: %s", method, path, e)
            raise FlightApiError(-1, f"Request timed out: {e}") from e
        except httpx.HTTPError as e:
            logger.error("Network error on %s %s: %s", method, path, e)
            raise FlightApiError(-1, f"Network error: {e}") from e

        if not response.is_success:
            logger.error(
                "Flight API error: %d %s",
                response.status_code,
                response.text[:200],
            )
            raise FlightApiError(
                response.status_code,
                f"{method} {path} failed with status {response.status_code}",
            )

        try:
            return response.json()
        except ValueError as e:
            logger.error("Invalid JSON response from %s: %s", path, e)
            raise InvalidResponseError(response.status_code, str(e)) from e

    async def fetch_flights(self) -> List[FlightLeg]:
        data = await self._request("GET", self._config.flights_path)
        try:
            flights = parse_flights(data)
        except (ValidationError, ValueError) as e:
            logger.error("Malformed flight catalog: %s", e)
            raise InvalidResponseError(200, str(e)) from e

        logger.info("Fetched %d flights", len(flights))
        return flights

    async def search(self, criteria: SearchCriteria) -> List[Itinerary]:
        body = SearchRequestBody(**criteria.to_payload())
        data = await self._request(
            "POST",
            self._config.search_path,
            json=body.model_dump(),
        )
        try:
            itineraries = parse_itineraries(data)
        except (ValidationError, ValueError) as e:
            logger.error("Malformed search response: %s", e)
            raise InvalidResponseError(200, str(e)) from e

        logger.info(
            "Search %s -> %s (%s) returned %d itineraries",
            criteria.origin,
            criteria.destination,
            criteria.rank_by.name,
            len(itineraries),
        )
        return itineraries
