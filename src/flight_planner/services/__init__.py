"""
Domain services for the Flight Planner.

Services orchestrate catalog loading and searching through the backend
port, and shape server responses for display.
"""

from src.flight_planner.services.catalog_loader import CatalogLoader
from src.flight_planner.services.city_service import derive_cities
from src.flight_planner.services.presenter import (
    ItineraryView,
    catalog_display_frame,
    catalog_frame,
    format_cost,
    format_duration,
    format_route,
    present_itineraries,
)
from src.flight_planner.services.search_session import SearchSession, validate_criteria

__all__ = [
    # Catalog
    "CatalogLoader",
    "derive_cities",
    # Search
    "SearchSession",
    "validate_criteria",
    # Presenter
    "ItineraryView",
    "format_duration",
    "format_cost",
    "format_route",
    "present_itineraries",
    "catalog_frame",
    "catalog_display_frame",
]
