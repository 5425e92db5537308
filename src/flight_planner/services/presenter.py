"""
Response presenter for catalog and search results.

Pure formatting helpers: durations, costs, route paths, itinerary
views and the tabular catalog used by the available-flights table.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import pandas as pd

from src.flight_planner.config import DisplayConfig, PlannerConfig
from src.flight_planner.schemas.flight import CatalogFrameSchema, FlightLeg
from src.flight_planner.schemas.itinerary import Itinerary

logger = logging.getLogger(__name__)

__all__ = [
    "ItineraryView",
    "format_duration",
    "format_cost",
    "format_route",
    "present_itineraries",
    "catalog_frame",
    "catalog_display_frame",
]

CATALOG_COLUMNS = ["origin", "destination", "duration_minutes", "cost"]

_DEFAULT_DISPLAY = PlannerConfig.display


@dataclass(frozen=True)
class ItineraryView:
    """Display strings for one ranked itinerary."""

    rank: int
    label: str
    route: str
    total_time: str
    total_cost: str


def format_duration(minutes: Optional[int]) -> str:
    """
    Format minutes as hours and remainder minutes.

    Args:
        minutes: Non-negative duration in minutes.

    Returns:
        Formatted string like '2h 5m'; '-' when the value is missing.

    Examples:
        >>> format_duration(125)
        '2h 5m'
        >>> format_duration(59)
        '0h 59m'
    """
    if minutes is None:
        return "-"
    minutes = int(minutes)
    if minutes < 0:
        raise ValueError(f"Duration must be non-negative, got {minutes}")

    hours = minutes // 60
    mins = minutes % 60
    return f"{hours}h {mins}m"


def format_cost(cost: float, display: Optional[DisplayConfig] = None) -> str:
    """
    Format a cost with the currency prefix.

    Whole amounts are shown without decimals, anything else with two.

    Examples:
        >>> format_cost(350)
        '$350'
        >>> format_cost(99.5)
        '$99.50'
    """
    display = display or _DEFAULT_DISPLAY
    value = float(cost)
    if value.is_integer():
        return f"{display.currency_symbol}{int(value)}"
    return f"{display.currency_symbol}{value:.2f}"


def format_route(stops: Sequence[str], display: Optional[DisplayConfig] = None) -> str:
    """Join cities into a path like 'NYC → CHI → LAX'."""
    display = display or _DEFAULT_DISPLAY
    return display.route_separator.join(stops)


def present_itineraries(
    itineraries: Sequence[Itinerary],
    display: Optional[DisplayConfig] = None,
) -> List[ItineraryView]:
    """
    Build display rows for search results.

    Order is preserved: the first itinerary is the backend's best match.
    """
    display = display or _DEFAULT_DISPLAY
    return [
        ItineraryView(
            rank=index,
            label=f"{display.path_label} {index}",
            route=format_route(itinerary.stops, display),
            total_time=format_duration(itinerary.total_time),
            total_cost=format_cost(itinerary.total_cost, display),
        )
        for index, itinerary in enumerate(itineraries, start=1)
    ]


def catalog_frame(flights: Sequence[FlightLeg]) -> pd.DataFrame:
    """
    Tabulate the catalog, one row per leg in catalog order.

    Returns:
        DataFrame validated against CatalogFrameSchema. Empty catalogs give
        an empty frame with the schema's columns.
    """
    if not flights:
        return pd.DataFrame(columns=CATALOG_COLUMNS)

    df = pd.DataFrame(
        [
            {
                "origin": leg.origin,
                "destination": leg.destination,
                "duration_minutes": leg.duration_minutes,
                "cost": leg.cost,
            }
            for leg in flights
        ],
        columns=CATALOG_COLUMNS,
    )
    return CatalogFrameSchema.validate(df)


def catalog_display_frame(
    flights: Sequence[FlightLeg],
    display: Optional[DisplayConfig] = None,
) -> pd.DataFrame:
    """
    Catalog table with formatted duration and cost columns.

    Uses the same cost rule as the itinerary display.
    """
    df = catalog_frame(flights)
    if df.empty:
        return pd.DataFrame(columns=["From", "To", "Duration", "Cost"])

    display = display or _DEFAULT_DISPLAY
    display_df = pd.DataFrame(
        {
            "From": df["origin"],
            "To": df["destination"],
            "Duration": df["duration_minutes"].apply(format_duration),
            "Cost": df["cost"].apply(lambda c: format_cost(c, display)),
        }
    )
    logger.debug("Prepared catalog table with %d rows", len(display_df))
    return display_df
