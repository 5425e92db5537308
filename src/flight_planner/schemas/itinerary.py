"""
Itinerary schema.

Defines the immutable result record returned by the search backend.
Ranking is decided by the backend; the client only preserves order.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Itinerary:
    """
    One ranked candidate route.

    Attributes:
        stops: Ordered cities visited, origin first and destination last.
        total_time: Total travel time in minutes.
        total_cost: Total price of all legs.
    """

    stops: tuple[str, ...]
    total_time: int
    total_cost: float

    def __post_init__(self) -> None:
        if len(self.stops) < 2:
            raise ValueError("Itinerary needs at least an origin and a destination")
        if self.total_time < 0 or self.total_cost < 0:
            raise ValueError("Itinerary totals must be non-negative")
