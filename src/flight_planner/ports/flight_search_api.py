"""
Flight Search API port interface.

Defines the abstract contract for the two backend endpoints the client
consumes. This port decouples the orchestration core from the transport.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from src.flight_planner.schemas.flight import FlightLeg
    from src.flight_planner.schemas.itinerary import Itinerary
    from src.flight_planner.schemas.search import SearchCriteria


class FlightSearchApi(ABC):
    """
    Abstract interface for the flight search backend.

    Implementations raise FlightApiError for any transport error,
    non-success status or undecodable body. They never retry.

    Implementations:
    - HttpFlightSearchApi: JSON over HTTP via httpx
    """

    @abstractmethod
    async def fetch_flights(self) -> List[FlightLeg]:
        """
        Fetch the full flight catalog.

        Returns:
            List of FlightLeg in backend order.

        Raises:
            FlightApiError: If the catalog could not be retrieved.
        """
        ...

    @abstractmethod
    async def search(self, criteria: SearchCriteria) -> List[Itinerary]:
        """
        Request ranked itineraries for validated criteria.

        Args:
            criteria: Origin, destination and rank criterion.

        Returns:
            Itineraries in the backend's ranking order (possibly empty).

        Raises:
            FlightApiError: If the search could not be completed.
        """
        ...

    async def close(self) -> None:
        """Release transport resources. Default is a no-op."""
        return None

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable backend identifier."""
        ...
