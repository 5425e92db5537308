"""
Search request schemas.

Defines the rank criterion and the user-submitted search criteria.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict


class RankBy(Enum):
    """
    Optimization key sent to the backend as ``sortBy``.

    Ranking itself is computed by the backend.
    """

    COST = "C"
    """Cheapest routes first."""

    TIME = "T"
    """Fastest routes first."""

    @classmethod
    def from_code(cls, code: str) -> "RankBy":
        """Parse a single-character code, defaulting to COST when unset."""
        if not code:
            return cls.COST
        return cls(code.upper())


@dataclass(frozen=True)
class SearchCriteria:
    """
    Search form values.

    Empty strings mean "not selected yet". The non-empty and distinct
    endpoint checks run in the search session before submission.

    Attributes:
        origin: Departure city.
        destination: Arrival city.
        rank_by: Optimization criterion.
    """

    origin: str = ""
    destination: str = ""
    rank_by: RankBy = RankBy.COST

    def with_changes(self, **changes) -> SearchCriteria:
        """Return a copy with the given fields replaced."""
        if "rank_by" in changes and isinstance(changes["rank_by"], str):
            changes["rank_by"] = RankBy.from_code(changes["rank_by"])
        return replace(self, **changes)

    def to_payload(self) -> Dict[str, str]:
        """Request body for POST /search."""
        return {
            "origin": self.origin,
            "destination": self.destination,
            "sortBy": self.rank_by.value,
        }
