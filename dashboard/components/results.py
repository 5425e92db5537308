"""
Results component for the error box and ranked itineraries.
"""

import html

import streamlit as st

from src.flight_planner.schemas.session import SessionState
from src.flight_planner.services.presenter import present_itineraries

# Markdown still runs inside the HTML block, so emphasis markers are escaped too.
_MARKDOWN_ENTITIES = str.maketrans({"*": "&#42;", "_": "&#95;", "`": "&#96;", "\\": "&#92;"})


def _escape(text: str) -> str:
    """Make backend-supplied text safe to embed in the result card markup."""
    return html.escape(text, quote=True).translate(_MARKDOWN_ENTITIES)


def render_error(state: SessionState) -> None:
    """Show the current user-visible error, if any."""
    if state.error_message:
        st.error(state.error_message)


def render_results(state: SessionState) -> None:
    """
    Render itineraries in the order returned by the backend.

    City names come from the backend and are escaped before they reach
    the card markup.

    Args:
        state: Session state holding the last completed search.
    """
    if not state.has_results:
        return

    st.subheader("Flight Results")
    for view in present_itineraries(state.itineraries):
        st.markdown(
            f"""
            <div class="result-item">
                <div class="result-path"><strong>{_escape(view.label)}:</strong> {_escape(view.route)}</div>
                <div class="result-stats">
                    <span>Total Time: {_escape(view.total_time)}</span>
                    <span>Total Cost: {_escape(view.total_cost)}</span>
                </div>
            </div>
            """,
            unsafe_allow_html=True,
        )
