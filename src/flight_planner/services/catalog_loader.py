"""
Catalog Loader - Fetches the flight catalog once per session.

Loads the catalog from the backend, derives the city list and stores
both on the session state. A failed load is final for the session.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from src.flight_planner.config import MessageConfig
from src.flight_planner.exceptions import FlightApiError
from src.flight_planner.schemas.flight import FlightLeg
from src.flight_planner.services.city_service import derive_cities

if TYPE_CHECKING:
    from src.flight_planner.ports.flight_search_api import FlightSearchApi
    from src.flight_planner.schemas.session import SessionState

logger = logging.getLogger(__name__)


class CatalogLoader:
    """
    Loads the flight catalog and the derived city list.

    The first call to ``load`` issues the request; later calls return
    what that call produced without touching the backend again.

    Attributes:
        _api: Backend port.
        _state: Shared session state.
        _messages: User-facing messages.
        _attempted: Whether the one load attempt has run.
    """

    def __init__(
        self,
        api: FlightSearchApi,
        state: SessionState,
        messages: Optional[MessageConfig] = None,
    ) -> None:
        self._api = api
        self._state = state
        self._messages = messages or MessageConfig()
        self._attempted = False

    @property
    def attempted(self) -> bool:
        return self._attempted

    async def load(self) -> List[FlightLeg]:
        """
        Fetch the catalog and populate flights and cities.

        Returns:
            Loaded flight legs, or an empty list if the load failed.
        """
        if self._attempted:
            return list(self._state.flights)
        self._attempted = True

        try:
            flights = await self._api.fetch_flights()
        except FlightApiError as e:
            if e.is_transport_error:
                logger.error("Flight server unreachable while loading flights: %s", e)
            else:
                logger.error("Error loading flights (status %d): %s", e.status_code, e)
            self._state.set_catalog((), ())
            self._state.report_error(self._messages.catalog_load_failed)
            return []

        cities = derive_cities(flights)
        self._state.set_catalog(flights, cities)
        logger.info("Loaded %d flights covering %d cities", len(flights), len(cities))
        return list(flights)
