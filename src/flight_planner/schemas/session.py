"""
Session state for one planner session.

SessionState is the single mutable context object shared by the catalog
loader and the search session. Fields are only changed through its methods
so the phase, result and error invariants hold after every call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence

from src.flight_planner.schemas.flight import FlightLeg
from src.flight_planner.schemas.itinerary import Itinerary
from src.flight_planner.schemas.search import SearchCriteria


class SearchPhase(Enum):
    """Lifecycle of the search request."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class SessionState:
    """
    Process-wide UI state, constructed once per session.

    Invariant: ``itineraries`` and ``error_message`` are never set together,
    and ``itineraries`` is empty unless ``phase`` is SUCCESS.

    Attributes:
        phase: Current search lifecycle phase.
        criteria: Current form input.
        flights: Loaded catalog (empty until loaded or on failure).
        cities: Cities derived from the catalog.
        itineraries: Results of the last completed search.
        error_message: User-visible error, if any.
        generation: Token of the newest search; older responses are stale.
    """

    phase: SearchPhase = SearchPhase.IDLE
    criteria: SearchCriteria = field(default_factory=SearchCriteria)
    flights: tuple[FlightLeg, ...] = ()
    cities: tuple[str, ...] = ()
    itineraries: tuple[Itinerary, ...] = ()
    error_message: Optional[str] = None
    generation: int = 0

    @property
    def is_loading(self) -> bool:
        return self.phase is SearchPhase.LOADING

    @property
    def can_submit(self) -> bool:
        """Submit affordance is disabled while a search is outstanding."""
        return not self.is_loading

    @property
    def has_results(self) -> bool:
        return bool(self.itineraries)

    def update_criteria(self, **changes) -> SearchCriteria:
        """Apply form input changes (origin, destination, rank_by)."""
        self.criteria = self.criteria.with_changes(**changes)
        return self.criteria

    def set_catalog(self, flights: Sequence[FlightLeg], cities: Sequence[str]) -> None:
        """Replace catalog and city list wholesale."""
        self.flights = tuple(flights)
        self.cities = tuple(cities)

    def report_error(self, message: str) -> None:
        """Show an error without touching the search phase."""
        self.itineraries = ()
        self.error_message = message

    def reject(self, message: str) -> None:
        """Record a validation failure; no request is issued."""
        self.report_error(message)

    def begin_search(self) -> int:
        """
        Enter LOADING for a new search.

        Clears error and results and returns the token the response must
        present to be applied.
        """
        self.generation += 1
        self.phase = SearchPhase.LOADING
        self.error_message = None
        self.itineraries = ()
        return self.generation

    def is_current(self, generation: int) -> bool:
        return generation == self.generation

    def complete_search(self, generation: int, itineraries: Sequence[Itinerary]) -> bool:
        """
        Apply a successful response.

        Returns:
            False if the response belongs to a superseded search and was dropped.
        """
        if not self.is_current(generation):
            return False
        self.phase = SearchPhase.SUCCESS
        self.error_message = None
        self.itineraries = tuple(itineraries)
        return True

    def fail_search(self, generation: int, message: str) -> bool:
        """
        Apply a failed response.

        Returns:
            False if the failure belongs to a superseded search and was dropped.
        """
        if not self.is_current(generation):
            return False
        self.phase = SearchPhase.ERROR
        self.itineraries = ()
        self.error_message = message
        return True

    def clear(self) -> None:
        """Return to IDLE, dropping results, errors and any outstanding search."""
        self.generation += 1
        self.phase = SearchPhase.IDLE
        self.itineraries = ()
        self.error_message = None
