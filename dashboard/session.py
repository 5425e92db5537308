"""
Per-browser-session planner client handling.

Streamlit reruns the script on every interaction, so the planner client
(and its session state) is kept in ``st.session_state`` and constructed
once per browser session.
"""

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

import streamlit as st

from src.flight_planner.application import FlightPlannerClient

logger = logging.getLogger(__name__)

T = TypeVar("T")

CLIENT_KEY = "planner_client"


def get_client() -> FlightPlannerClient:
    """Return the session's planner client, creating it on first use."""
    if CLIENT_KEY not in st.session_state:
        logger.info("Creating planner client for new session")
        st.session_state[CLIENT_KEY] = FlightPlannerClient()
    return st.session_state[CLIENT_KEY]


def run_action(
    client: FlightPlannerClient,
    action: Callable[[], Awaitable[T]],
) -> T:
    """
    Run one client coroutine to completion on a fresh event loop.

    The HTTP transport is closed afterwards because its connections are
    bound to the loop that created them; the adapter reopens lazily.
    """

    async def _run() -> T:
        try:
            return await action()
        finally:
            await client.close()

    return asyncio.run(_run())


def ensure_catalog_loaded(client: FlightPlannerClient) -> None:
    """Load the catalog on the first run of a session."""
    if not client.catalog_attempted:
        run_action(client, client.start)
