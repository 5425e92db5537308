"""
City service for deriving selectable cities from the flight catalog.
"""

from typing import Iterable, List

from src.flight_planner.schemas.flight import FlightLeg

__all__ = ["derive_cities"]


def derive_cities(catalog: Iterable[FlightLeg]) -> List[str]:
    """
    Collect every origin and destination in the catalog.

    Args:
        catalog: Loaded flight legs.

    Returns:
        Deduplicated city identifiers in ascending lexicographic order.

    Examples:
        >>> derive_cities([FlightLeg("NYC", "LAX", 330, 400)])
        ['LAX', 'NYC']
    """
    cities = set()
    for leg in catalog:
        cities.add(leg.origin)
        cities.add(leg.destination)
    return sorted(cities)
