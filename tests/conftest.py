"""
Shared pytest fixtures for flight planner tests.

Provides sample catalog and search payloads, API configuration pointing
at a fake host, and the asyncio backend for anyio-marked tests.
"""

from typing import List
from unittest.mock import AsyncMock

import pytest

from src.flight_planner.config import ApiConfig
from src.flight_planner.ports.flight_search_api import FlightSearchApi
from src.flight_planner.schemas.flight import FlightLeg
from src.flight_planner.schemas.itinerary import Itinerary
from src.flight_planner.schemas.session import SessionState

TEST_HOST = "http://testserver"
TEST_BASE_URL = f"{TEST_HOST}/api"


@pytest.fixture
def anyio_backend():
    """Use only asyncio backend (trio not installed)."""
    return "asyncio"


@pytest.fixture
def api_config() -> ApiConfig:
    """API config pointing at the fake test host with short timeouts."""
    return ApiConfig(host=TEST_HOST, request_timeout_s=2.0, connect_timeout_s=1.0)


@pytest.fixture
def flights_payload() -> List[dict]:
    """GET /flights body with a duplicated city pair and a hub."""
    return [
        {"from": "NYC", "to": "LAX", "time": 330, "cost": 400},
        {"from": "NYC", "to": "CHI", "time": 150, "cost": 180},
        {"from": "CHI", "to": "LAX", "time": 250, "cost": 170},
        {"from": "LAX", "to": "NYC", "time": 310, "cost": 390.5},
    ]


@pytest.fixture
def sample_flights() -> List[FlightLeg]:
    """Domain version of flights_payload."""
    return [
        FlightLeg("NYC", "LAX", 330, 400.0),
        FlightLeg("NYC", "CHI", 150, 180.0),
        FlightLeg("CHI", "LAX", 250, 170.0),
        FlightLeg("LAX", "NYC", 310, 390.5),
    ]


@pytest.fixture
def search_payload() -> List[dict]:
    """POST /search body ranked by time."""
    return [
        {"cities": ["NYC", "CHI", "LAX"], "totalTime": 400, "totalCost": 350},
        {"cities": ["NYC", "LAX"], "totalTime": 330, "totalCost": 400},
    ]


@pytest.fixture
def sample_itineraries() -> List[Itinerary]:
    """Domain version of search_payload, in backend order."""
    return [
        Itinerary(stops=("NYC", "CHI", "LAX"), total_time=400, total_cost=350.0),
        Itinerary(stops=("NYC", "LAX"), total_time=330, total_cost=400.0),
    ]


@pytest.fixture
def state() -> SessionState:
    return SessionState()


@pytest.fixture
def mock_api() -> AsyncMock:
    """Backend port mock; async methods return AsyncMocks."""
    api = AsyncMock(spec=FlightSearchApi)
    api.name = "mock"
    return api
