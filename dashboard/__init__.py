"""
Dashboard module for the Flight Planner.

Browser render surface for the planner client: search form, errors,
ranked results and the available flights table.

Usage:
    from dashboard import run_dashboard
    run_dashboard()
"""

import streamlit as st

from dashboard.components import (
    render_error,
    render_flight_list,
    render_results,
    render_search_form,
)
from dashboard.config import DashboardConfig
from dashboard.session import ensure_catalog_loaded, get_client


def run_dashboard() -> None:
    """
    Main dashboard application entry point.

    Loads the catalog once per session and renders the planner view.
    """
    client = get_client()
    ensure_catalog_loaded(client)

    st.title(DashboardConfig.page.title)
    st.caption(DashboardConfig.page.subtitle)

    render_search_form(client)
    render_error(client.state)
    render_results(client.state)

    st.markdown("---")
    render_flight_list(client.flights)


__all__ = ["run_dashboard"]
