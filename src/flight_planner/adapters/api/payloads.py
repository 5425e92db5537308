"""
Wire payload models for the flight backend.

Pydantic models describing the JSON contract of GET /flights and
POST /search, plus conversion to the domain dataclasses.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from src.flight_planner.schemas.flight import FlightLeg
from src.flight_planner.schemas.itinerary import Itinerary


class FlightLegRecord(BaseModel):
    """One element of the GET /flights array."""

    model_config = ConfigDict(populate_by_name=True)

    origin: str = Field(alias="from", min_length=1)
    destination: str = Field(alias="to", min_length=1)
    time: int = Field(ge=0)
    cost: float = Field(ge=0)

    def to_leg(self) -> FlightLeg:
        return FlightLeg(
            origin=self.origin,
            destination=self.destination,
            duration_minutes=self.time,
            cost=self.cost,
        )


class ItineraryRecord(BaseModel):
    """One element of the POST /search array."""

    model_config = ConfigDict(populate_by_name=True)

    cities: List[str] = Field(min_length=2)
    total_time: int = Field(alias="totalTime", ge=0)
    total_cost: float = Field(alias="totalCost", ge=0)

    def to_itinerary(self) -> Itinerary:
        return Itinerary(
            stops=tuple(self.cities),
            total_time=self.total_time,
            total_cost=self.total_cost,
        )


class SearchRequestBody(BaseModel):
    """Body of POST /search."""

    origin: str
    destination: str
    sortBy: str = Field(default="C", pattern="^[CT]$")


FLIGHT_LIST_ADAPTER = TypeAdapter(List[FlightLegRecord])
ITINERARY_LIST_ADAPTER = TypeAdapter(List[ItineraryRecord])


def parse_flights(data: object) -> List[FlightLeg]:
    """Validate a decoded /flights body and convert it to FlightLegs."""
    return [record.to_leg() for record in FLIGHT_LIST_ADAPTER.validate_python(data)]


def parse_itineraries(data: object) -> List[Itinerary]:
    """Validate a decoded /search body, keeping the backend's order."""
    return [
        record.to_itinerary()
        for record in ITINERARY_LIST_ADAPTER.validate_python(data)
    ]
