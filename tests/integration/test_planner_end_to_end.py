"""
End-to-end tests for FlightPlannerClient.

Drives the full stack (HTTP adapter, catalog loader, search session and
presenter) against a mocked backend.
"""

import json

import httpx
import pytest
import respx

from src.flight_planner.application import FlightPlannerClient
from src.flight_planner.config import ApiConfig
from src.flight_planner.schemas.search import RankBy, SearchCriteria
from src.flight_planner.schemas.session import SearchPhase
from src.flight_planner.services.presenter import present_itineraries

BASE_URL = "http://testserver/api"


@pytest.fixture
def client(api_config: ApiConfig) -> FlightPlannerClient:
    return FlightPlannerClient(api_config=api_config)


class TestCatalogScenario:
    """Catalog load through the client."""

    @pytest.mark.anyio
    @respx.mock
    async def test_single_leg_catalog_derives_cities(self, client: FlightPlannerClient):
        """Scenario A: one NYC -> LAX leg gives cities LAX and NYC."""
        respx.get(f"{BASE_URL}/flights").mock(
            return_value=httpx.Response(
                200, json=[{"from": "NYC", "to": "LAX", "time": 330, "cost": 400}]
            )
        )

        async with client:
            pass

        assert client.cities == ["LAX", "NYC"]
        assert len(client.flights) == 1
        assert client.state.error_message is None

    @pytest.mark.anyio
    @respx.mock
    async def test_catalog_failure_then_search_still_possible(
        self,
        client: FlightPlannerClient,
        search_payload,
    ):
        respx.get(f"{BASE_URL}/flights").mock(return_value=httpx.Response(502))
        respx.post(f"{BASE_URL}/search").mock(
            return_value=httpx.Response(200, json=search_payload)
        )

        await client.start()
        assert client.cities == []
        assert client.state.error_message.startswith("Failed to load flight data")

        await client.submit(SearchCriteria("NYC", "LAX"))
        assert client.state.error_message is None
        assert client.state.phase is SearchPhase.SUCCESS
        await client.close()


class TestSearchScenarios:
    """Search submissions through the client."""

    @pytest.mark.anyio
    @respx.mock
    async def test_time_ranked_search_renders_itinerary(self, client: FlightPlannerClient):
        """Scenario B: a time-ranked search shows one rendered itinerary."""
        route = respx.post(f"{BASE_URL}/search").mock(
            return_value=httpx.Response(
                200,
                json=[{"cities": ["NYC", "CHI", "LAX"], "totalTime": 400, "totalCost": 350}],
            )
        )

        client.update_criteria(origin="NYC", destination="LAX", rank_by=RankBy.TIME)
        await client.submit()
        await client.close()

        assert json.loads(route.calls.last.request.content) == {
            "origin": "NYC",
            "destination": "LAX",
            "sortBy": "T",
        }
        assert client.state.phase is SearchPhase.SUCCESS
        views = present_itineraries(client.state.itineraries)
        assert len(views) == 1
        assert views[0].route == "NYC → CHI → LAX"
        assert views[0].total_time == "6h 40m"
        assert views[0].total_cost == "$350"

    @pytest.mark.anyio
    @respx.mock
    async def test_server_error_shows_message(self, client: FlightPlannerClient):
        """Scenario C: HTTP 500 ends in ERROR with submit re-enabled."""
        respx.post(f"{BASE_URL}/search").mock(return_value=httpx.Response(500))

        result = await client.submit(SearchCriteria("NYC", "LAX", RankBy.COST))
        await client.close()

        assert result == []
        assert client.state.phase is SearchPhase.ERROR
        assert client.state.error_message.startswith("Failed to search flights")
        assert client.state.itineraries == ()
        assert client.state.can_submit is True

    @pytest.mark.anyio
    @respx.mock
    async def test_invalid_submission_sends_nothing(self, client: FlightPlannerClient):
        route = respx.post(f"{BASE_URL}/search").mock(return_value=httpx.Response(200, json=[]))

        await client.submit(SearchCriteria("NYC", ""))
        await client.submit(SearchCriteria("NYC", "NYC"))

        assert route.call_count == 0
        assert client.state.error_message == "Origin and destination cannot be the same"

    @pytest.mark.anyio
    @respx.mock
    async def test_clear_after_results(self, client: FlightPlannerClient, search_payload):
        respx.post(f"{BASE_URL}/search").mock(
            return_value=httpx.Response(200, json=search_payload)
        )

        await client.submit(SearchCriteria("NYC", "LAX"))
        client.clear()
        await client.close()

        assert client.state.phase is SearchPhase.IDLE
        assert client.state.itineraries == ()
