"""
Application layer for the Flight Planner.

This layer provides the public API for the planner client.
It acts as a facade, handling dependency initialization and providing
a simple interface for render surfaces.
"""

from src.flight_planner.application.planner_client import FlightPlannerClient

__all__ = ["FlightPlannerClient"]
