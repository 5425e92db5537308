"""
Configuration module for the flight planner client.

Centralizes backend endpoints, timeouts, user-facing messages and
display defaults. Environment values are read from a .env file when present.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_HOST = "http://localhost:8000"
API_BASE_PATH = "/api"


def _env_float(name: str, default: float) -> float:
    """Read a float from the environment, falling back on bad input."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class ApiConfig:
    """
    Backend connection settings.

    Attributes:
        host: Scheme and authority of the backend (FLIGHT_PLANNER_HOST).
        base_path: Fixed path prefix for both endpoints.
        request_timeout_s: Per-request timeout in seconds (FLIGHT_PLANNER_TIMEOUT_S).
        connect_timeout_s: TCP connect timeout in seconds.
    """

    host: str = field(default_factory=lambda: os.getenv("FLIGHT_PLANNER_HOST", DEFAULT_HOST))
    base_path: str = API_BASE_PATH
    request_timeout_s: float = field(
        default_factory=lambda: _env_float("FLIGHT_PLANNER_TIMEOUT_S", 30.0)
    )
    connect_timeout_s: float = 5.0
    flights_path: str = "/flights"
    search_path: str = "/search"

    @property
    def base_url(self) -> str:
        """Full API base, e.g. 'http://localhost:8000/api'."""
        return f"{self.host.rstrip('/')}{self.base_path}"


@dataclass(frozen=True)
class MessageConfig:
    """User-facing messages shown in the error box."""

    catalog_load_failed: str = (
        "Failed to load flight data. Please make sure the server is running."
    )
    missing_cities: str = "Please select both origin and destination cities"
    same_cities: str = "Origin and destination cannot be the same"
    search_failed: str = (
        "Failed to search flights. Please make sure the server is running."
    )
    searching: str = "Searching for flights..."


@dataclass(frozen=True)
class DisplayConfig:
    """Formatting defaults shared by catalog and itinerary displays."""

    currency_symbol: str = "$"
    route_separator: str = " → "
    path_label: str = "Path"


class PlannerConfig:
    """Main configuration container providing access to all config sections."""

    api = ApiConfig()
    messages = MessageConfig()
    display = DisplayConfig()
