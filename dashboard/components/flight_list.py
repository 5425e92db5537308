"""
Available flights component.

Shows every leg of the loaded catalog with formatted duration and cost.
"""

from typing import Sequence

import streamlit as st

from src.flight_planner.schemas.flight import FlightLeg
from src.flight_planner.services.presenter import catalog_display_frame


def render_flight_list(flights: Sequence[FlightLeg]) -> None:
    """
    Render the catalog table.

    Args:
        flights: Loaded flight legs (empty if the load failed).
    """
    st.subheader("Available Flights")

    if not flights:
        st.info("No flights loaded.")
        return

    st.dataframe(
        catalog_display_frame(flights),
        column_config={
            "From": st.column_config.TextColumn("From", width="small"),
            "To": st.column_config.TextColumn("To", width="small"),
            "Duration": st.column_config.TextColumn("Duration", width="small"),
            "Cost": st.column_config.TextColumn("Cost", width="small"),
        },
        hide_index=True,
        width="stretch",
    )
