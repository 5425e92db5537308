"""
Port interfaces for the Flight Planner.

Ports define the abstract interfaces the orchestration core uses to
talk to the backend. Adapters provide the concrete transports.
"""

from src.flight_planner.ports.flight_search_api import FlightSearchApi

__all__ = ["FlightSearchApi"]
