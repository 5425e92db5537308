"""
Styling module for dashboard appearance.

Provides functions for applying page configuration and custom CSS.
"""

import streamlit as st

from dashboard.config import DashboardConfig


def apply_page_config() -> None:
    """
    Apply Streamlit page configuration.

    Must be called before any other Streamlit commands.
    """
    config = DashboardConfig.page
    st.set_page_config(
        page_title=config.title,
        page_icon=config.icon,
        layout=config.layout,
        initial_sidebar_state=config.sidebar_state,
    )


def apply_custom_css() -> None:
    """Inject CSS for the result cards based on DashboardConfig.style."""
    style = DashboardConfig.style

    css = f"""
    <style>
        .result-item {{
            background-color: {style.result_card_bg};
            border: 1px solid {style.result_card_border};
            border-radius: 8px;
            padding: 16px;
            margin-bottom: 12px;
        }}
        .result-path {{
            color: {style.result_path_color};
            font-size: 18px;
        }}
        .result-stats {{
            color: {style.result_stat_color};
            display: flex;
            gap: 24px;
            margin-top: 8px;
        }}
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
