"""
Search form component.

Renders origin/destination selectors fed by the derived city list and
the rank criterion selector, and submits the search on demand.
"""

from typing import Dict, List

import streamlit as st

from dashboard.config import DashboardConfig
from dashboard.session import run_action
from src.flight_planner.application import FlightPlannerClient
from src.flight_planner.config import PlannerConfig
from src.flight_planner.schemas.search import RankBy

RANK_OPTIONS: Dict[str, RankBy] = {
    "Cost": RankBy.COST,
    "Time": RankBy.TIME,
}


def _city_options(cities: List[str]) -> List[str]:
    # Empty string is the "nothing selected" placeholder.
    return [""] + list(cities)


def render_search_form(client: FlightPlannerClient) -> None:
    """
    Render the search form and run the search when submitted.

    Args:
        client: Session planner client.
    """
    form = DashboardConfig.form
    state = client.state
    options = _city_options(client.cities)
    criteria = state.criteria

    st.subheader("Search Flights")
    with st.form("search_form"):
        origin = st.selectbox(
            form.origin_label,
            options,
            index=options.index(criteria.origin) if criteria.origin in options else 0,
            format_func=lambda c: c or form.origin_placeholder,
        )
        destination = st.selectbox(
            form.destination_label,
            options,
            index=(
                options.index(criteria.destination)
                if criteria.destination in options
                else 0
            ),
            format_func=lambda c: c or form.destination_placeholder,
        )
        rank_labels = list(RANK_OPTIONS.keys())
        current_rank = next(
            label for label, rank in RANK_OPTIONS.items() if rank is criteria.rank_by
        )
        rank_label = st.selectbox(
            form.rank_label,
            rank_labels,
            index=rank_labels.index(current_rank),
        )
        submitted = st.form_submit_button(
            form.submit_label,
            disabled=not state.can_submit,
        )

    if not submitted:
        return

    client.update_criteria(
        origin=origin,
        destination=destination,
        rank_by=RANK_OPTIONS[rank_label],
    )
    with st.spinner(PlannerConfig.messages.searching):
        run_action(client, client.submit)
