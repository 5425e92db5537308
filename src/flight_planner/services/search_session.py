"""
Search Session - Validates and submits route searches.

Owns the validation gate and the request lifecycle:
IDLE -> LOADING -> SUCCESS | ERROR, restarting into LOADING on the next
valid submission. Each submission gets a generation token; responses for
superseded submissions are dropped so the newest search always wins.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING, List, Optional

from src.flight_planner.config import ApiConfig, MessageConfig
from src.flight_planner.exceptions import CriteriaValidationError, FlightApiError
from src.flight_planner.schemas.itinerary import Itinerary
from src.flight_planner.schemas.search import SearchCriteria

if TYPE_CHECKING:
    from src.flight_planner.ports.flight_search_api import FlightSearchApi
    from src.flight_planner.schemas.session import SessionState

logger = logging.getLogger(__name__)

__all__ = ["SearchSession", "validate_criteria"]


def validate_criteria(
    criteria: SearchCriteria,
    messages: Optional[MessageConfig] = None,
) -> None:
    """
    Check criteria before any request is sent.

    Args:
        criteria: Form values to check.
        messages: Message set for the rejection text.

    Raises:
        CriteriaValidationError: If a city is missing or both cities match.
    """
    messages = messages or MessageConfig()
    if not criteria.origin or not criteria.destination:
        raise CriteriaValidationError(messages.missing_cities)
    if criteria.origin == criteria.destination:
        raise CriteriaValidationError(messages.same_cities)


class SearchSession:
    """
    Runs searches against the backend and records outcomes on the state.

    Failures of any kind are converted to the generic search failure
    message; the state always ends in a re-submittable configuration.

    Attributes:
        _api: Backend port.
        _state: Shared session state.
        _messages: User-facing messages.
        _timeout_s: Upper bound for one search call.
    """

    def __init__(
        self,
        api: FlightSearchApi,
        state: SessionState,
        messages: Optional[MessageConfig] = None,
        timeout_s: Optional[float] = None,
    ) -> None:
        """
        Initialize the search session.

        Args:
            api: Backend port implementation.
            state: Session state shared with the catalog loader.
            messages: Message set. If None, uses defaults.
            timeout_s: Search timeout in seconds. If None, uses ApiConfig.
        """
        self._api = api
        self._state = state
        self._messages = messages or MessageConfig()
        self._timeout_s = timeout_s if timeout_s is not None else ApiConfig().request_timeout_s

    def update_criteria(self, **changes) -> SearchCriteria:
        """Reflect form input (origin, destination, rank_by) on the state."""
        return self._state.update_criteria(**changes)

    def clear(self) -> None:
        """Drop results and errors and invalidate any outstanding search."""
        self._state.clear()

    async def submit(self, criteria: Optional[SearchCriteria] = None) -> List[Itinerary]:
        """
        Validate and run one search.

        Args:
            criteria: Criteria to search. If None, the current form input is used.

        Returns:
            Itineraries in backend order. Empty if the submission was rejected,
            failed, or was superseded by a newer submission.
        """
        if criteria is not None:
            self._state.update_criteria(
                origin=criteria.origin,
                destination=criteria.destination,
                rank_by=criteria.rank_by,
            )
        criteria = self._state.criteria

        try:
            validate_criteria(criteria, self._messages)
        except CriteriaValidationError as e:
            logger.info("Rejected search %r -> %r: %s", criteria.origin, criteria.destination, e)
            self._state.reject(e.message)
            return []

        generation = self._state.begin_search()
        start_time = time.perf_counter()

        try:
            itineraries = await asyncio.wait_for(
                self._api.search(criteria),
                timeout=self._timeout_s,
            )
        except FlightApiError as e:
            if e.is_transport_error:
                logger.error("Flight server unreachable during search #%d: %s", generation, e)
            else:
                logger.error(
                    "Error searching flights (search #%d, status %d): %s",
                    generation,
                    e.status_code,
                    e,
                )
            self._record_failure(generation)
            return []
        except asyncio.TimeoutError:
            logger.error("Search #%d timed out after %ss", generation, self._timeout_s)
            self._record_failure(generation)
            return []
        except Exception:
            logger.exception("Unexpected error searching flights")
            self._record_failure(generation)
            return []

        if not self._state.complete_search(generation, itineraries):
            logger.debug("Discarding stale response for search #%d", generation)
            return []

        logger.debug(
            "Search #%d completed with %d itineraries in %.0fms",
            generation,
            len(itineraries),
            (time.perf_counter() - start_time) * 1000,
        )
        return list(itineraries)

    def _record_failure(self, generation: int) -> None:
        if not self._state.fail_search(generation, self._messages.search_failed):
            logger.debug("Discarding stale failure for search #%d", generation)
