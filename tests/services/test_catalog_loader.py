"""
Tests for CatalogLoader.

Tests cover:
- Populating flights and cities on success
- Single load attempt per session
- Failure handling (no retry, message, empty catalog)
"""

from unittest.mock import AsyncMock

import pytest

from src.flight_planner.exceptions import FlightApiError, InvalidResponseError
from src.flight_planner.schemas.session import SearchPhase, SessionState
from src.flight_planner.services.catalog_loader import CatalogLoader

LOAD_FAILED = "Failed to load flight data. Please make sure the server is running."


class TestCatalogLoader:
    """Tests for CatalogLoader.load."""

    @pytest.mark.anyio
    async def test_load_populates_flights_and_cities(
        self,
        mock_api: AsyncMock,
        state: SessionState,
        sample_flights,
    ):
        """Successful load stores catalog and derived cities."""
        mock_api.fetch_flights.return_value = sample_flights

        loader = CatalogLoader(mock_api, state)
        result = await loader.load()

        assert result == sample_flights
        assert state.flights == tuple(sample_flights)
        assert state.cities == ("CHI", "LAX", "NYC")
        assert state.error_message is None

    @pytest.mark.anyio
    async def test_load_runs_once(
        self,
        mock_api: AsyncMock,
        state: SessionState,
        sample_flights,
    ):
        """Second call returns the loaded catalog without a request."""
        mock_api.fetch_flights.return_value = sample_flights
        loader = CatalogLoader(mock_api, state)

        await loader.load()
        again = await loader.load()

        mock_api.fetch_flights.assert_awaited_once()
        assert again == sample_flights

    @pytest.mark.anyio
    @pytest.mark.parametrize(
        "error",
        [
            FlightApiError(500),
            FlightApiError(-1, "Network error: connection refused"),
            InvalidResponseError(200, "not a list"),
        ],
    )
    async def test_failure_sets_message_and_empty_catalog(
        self,
        mock_api: AsyncMock,
        state: SessionState,
        error: FlightApiError,
    ):
        """Any backend failure leaves the catalog empty and shows the message."""
        mock_api.fetch_flights.side_effect = error

        loader = CatalogLoader(mock_api, state)
        result = await loader.load()

        assert result == []
        assert state.flights == ()
        assert state.cities == ()
        assert state.error_message == LOAD_FAILED
        assert state.phase is SearchPhase.IDLE
        assert loader.attempted is True

    @pytest.mark.anyio
    async def test_failure_is_not_retried(self, mock_api: AsyncMock, state: SessionState):
        """A failed load stays failed for the session."""
        mock_api.fetch_flights.side_effect = FlightApiError(503)
        loader = CatalogLoader(mock_api, state)

        await loader.load()
        await loader.load()

        mock_api.fetch_flights.assert_awaited_once()
        assert loader.attempted is True


class TestCatalogLoaderLogging:
    """Tests for how load failures are reported in the log."""

    @pytest.mark.anyio
    async def test_transport_failure_logged_as_unreachable(
        self,
        mock_api: AsyncMock,
        state: SessionState,
        caplog,
    ):
        mock_api.fetch_flights.side_effect = FlightApiError(-1, "Network error: refused")
        caplog.set_level("ERROR", logger="src.flight_planner.services.catalog_loader")

        await CatalogLoader(mock_api, state).load()

        assert any("unreachable" in record.message for record in caplog.records)

    @pytest.mark.anyio
    async def test_status_failure_logs_status_code(
        self,
        mock_api: AsyncMock,
        state: SessionState,
        caplog,
    ):
        mock_api.fetch_flights.side_effect = FlightApiError(503)
        caplog.set_level("ERROR", logger="src.flight_planner.services.catalog_loader")

        await CatalogLoader(mock_api, state).load()

        assert any("status 503" in record.message for record in caplog.records)
        assert not any("unreachable" in record.message for record in caplog.records)
