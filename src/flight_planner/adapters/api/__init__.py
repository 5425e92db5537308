from src.flight_planner.adapters.api.http_flight_api import HttpFlightSearchApi

__all__ = ["HttpFlightSearchApi"]
