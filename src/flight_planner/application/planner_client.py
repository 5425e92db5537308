"""
FlightPlannerClient - Public API for the flight planner client.

Facade that wires the backend adapter, the session state, the catalog
loader and the search session together once per session.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from src.flight_planner.adapters.api.http_flight_api import HttpFlightSearchApi
from src.flight_planner.config import ApiConfig, MessageConfig, PlannerConfig
from src.flight_planner.ports.flight_search_api import FlightSearchApi
from src.flight_planner.schemas.flight import FlightLeg
from src.flight_planner.schemas.itinerary import Itinerary
from src.flight_planner.schemas.search import SearchCriteria
from src.flight_planner.schemas.session import SessionState
from src.flight_planner.services.catalog_loader import CatalogLoader
from src.flight_planner.services.search_session import SearchSession

logger = logging.getLogger(__name__)


class FlightPlannerClient:
    """
    Main entry point for driving the planner from a render surface.

    Example usage:
        >>> client = FlightPlannerClient()
        >>> await client.start()
        >>> client.update_criteria(origin="NYC", destination="LAX", rank_by="T")
        >>> for itinerary in await client.submit():
        ...     print(itinerary.stops, itinerary.total_time)
        >>> await client.close()

    Attributes:
        _api: Backend port (HTTP by default).
        _state: Session state shared by loader and search session.
        _catalog: Catalog loader.
        _search: Search session.
    """

    def __init__(
        self,
        api: Optional[FlightSearchApi] = None,
        api_config: Optional[ApiConfig] = None,
        messages: Optional[MessageConfig] = None,
        state: Optional[SessionState] = None,
    ) -> None:
        """
        Initialize the client with optional custom dependencies.

        Args:
            api: Custom backend port. If None, uses HttpFlightSearchApi.
            api_config: Connection settings. Defaults to PlannerConfig.api.
            messages: User-facing messages. Defaults to PlannerConfig.messages.
            state: Pre-built session state. If None, a fresh one is created.
        """
        api_config = api_config or PlannerConfig.api
        messages = messages or PlannerConfig.messages

        self._api = api if api is not None else HttpFlightSearchApi(config=api_config)
        self._state = state if state is not None else SessionState()
        self._catalog = CatalogLoader(self._api, self._state, messages)
        self._search = SearchSession(
            self._api,
            self._state,
            messages,
            timeout_s=api_config.request_timeout_s,
        )

        logger.debug("FlightPlannerClient initialized with %s", self._api.name)

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def flights(self) -> List[FlightLeg]:
        return list(self._state.flights)

    @property
    def cities(self) -> List[str]:
        return list(self._state.cities)

    @property
    def catalog_attempted(self) -> bool:
        return self._catalog.attempted

    async def start(self) -> List[FlightLeg]:
        """Load the catalog; only the first call reaches the backend."""
        return await self._catalog.load()

    def update_criteria(self, **changes) -> SearchCriteria:
        return self._search.update_criteria(**changes)

    async def submit(self, criteria: Optional[SearchCriteria] = None) -> List[Itinerary]:
        return await self._search.submit(criteria)

    def clear(self) -> None:
        self._search.clear()

    async def close(self) -> None:
        """Release the backend transport."""
        await self._api.close()

    async def __aenter__(self) -> "FlightPlannerClient":
        await self.start()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
