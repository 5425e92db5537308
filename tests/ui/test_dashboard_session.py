"""
Tests for dashboard session helpers.

Tests running client coroutines from Streamlit's synchronous reruns.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from dashboard.session import ensure_catalog_loaded, run_action


@pytest.fixture
def fake_client() -> MagicMock:
    client = MagicMock()
    client.close = AsyncMock()
    client.start = AsyncMock(return_value=[])
    client.catalog_attempted = False
    return client


class TestRunAction:
    """Tests for run_action function."""

    def test_returns_result_and_closes_transport(self, fake_client: MagicMock) -> None:
        async def action():
            return ["result"]

        assert run_action(fake_client, action) == ["result"]
        fake_client.close.assert_awaited_once()

    def test_closes_transport_on_error(self, fake_client: MagicMock) -> None:
        async def action():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            run_action(fake_client, action)
        fake_client.close.assert_awaited_once()


class TestEnsureCatalogLoaded:
    """Tests for ensure_catalog_loaded function."""

    def test_loads_on_first_run(self, fake_client: MagicMock) -> None:
        ensure_catalog_loaded(fake_client)
        fake_client.start.assert_awaited_once()

    def test_skips_when_attempted(self, fake_client: MagicMock) -> None:
        fake_client.catalog_attempted = True
        ensure_catalog_loaded(fake_client)
        fake_client.start.assert_not_called()
