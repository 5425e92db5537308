"""
Flight catalog schemas.

FlightLeg is the immutable in-memory record for one direct flight.
CatalogFrameSchema is the Pandera contract for the tabular view of the
catalog used by the available-flights table.
"""

from dataclasses import dataclass

import pandera as pa
from pandera.typing import Series


@dataclass(frozen=True)
class FlightLeg:
    """
    Immutable representation of one direct flight offering.

    Attributes:
        origin: Departure city identifier (case-sensitive).
        destination: Arrival city identifier (case-sensitive).
        duration_minutes: Flight time in minutes.
        cost: Ticket price in the backend's currency.
    """

    origin: str
    destination: str
    duration_minutes: int
    cost: float

    def __post_init__(self) -> None:
        if not self.origin or not self.destination:
            raise ValueError("Flight leg endpoints must be non-empty")
        if self.duration_minutes < 0:
            raise ValueError(f"Negative duration: {self.duration_minutes}")
        if self.cost < 0:
            raise ValueError(f"Negative cost: {self.cost}")


class CatalogFrameSchema(pa.DataFrameModel):
    """
    Schema for the catalog table.

    One row per FlightLeg, in catalog order.
    """

    origin: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 1},
        description="Departure city",
    )
    destination: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 1},
        description="Arrival city",
    )
    duration_minutes: Series[int] = pa.Field(
        ge=0,
        description="Flight time in minutes",
    )
    cost: Series[float] = pa.Field(
        ge=0,
        description="Ticket price",
    )

    class Config:
        strict = False
        coerce = True
        name = "CatalogFrameSchema"
        ordered = True
