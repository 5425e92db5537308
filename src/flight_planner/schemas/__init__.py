"""
Schema definitions for the Flight Planner client.

Frozen dataclasses for catalog and search records, plus the mutable
session context and the Pandera contract for the catalog table.
"""

from .flight import CatalogFrameSchema, FlightLeg
from .itinerary import Itinerary
from .search import RankBy, SearchCriteria
from .session import SearchPhase, SessionState

__all__ = [
    # Catalog
    "FlightLeg",
    "CatalogFrameSchema",
    # Search
    "Itinerary",
    "RankBy",
    "SearchCriteria",
    # Session
    "SearchPhase",
    "SessionState",
]
