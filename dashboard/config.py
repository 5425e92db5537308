"""
Dashboard configuration module.

Centralizes page settings and styling values used by the
Streamlit render surface.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PageConfig:
    """Streamlit page configuration."""

    title: str = "Flight Planner"
    subtitle: str = "Find the best flight routes between cities"
    icon: str = "airplane"
    layout: str = "centered"
    sidebar_state: str = "collapsed"


@dataclass(frozen=True)
class FormConfig:
    """Search form labels and placeholders."""

    origin_label: str = "From:"
    origin_placeholder: str = "Select departure city"
    destination_label: str = "To:"
    destination_placeholder: str = "Select arrival city"
    rank_label: str = "Sort by:"
    submit_label: str = "Search Flights"


@dataclass(frozen=True)
class StyleConfig:
    """CSS styling configuration."""

    result_card_bg: str = "#f8f9fa"
    result_card_border: str = "#e9ecef"
    result_path_color: str = "#1e293b"
    result_stat_color: str = "#475569"


class DashboardConfig:
    """Main configuration container providing access to all config sections."""

    page = PageConfig()
    form = FormConfig()
    style = StyleConfig()
