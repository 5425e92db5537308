"""
Components module for reusable UI elements.

Provides the search form, result list, catalog table and styling helpers.
"""

from dashboard.components.flight_list import render_flight_list
from dashboard.components.results import render_error, render_results
from dashboard.components.search_form import render_search_form
from dashboard.components.styles import apply_custom_css, apply_page_config

__all__ = [
    "apply_page_config",
    "apply_custom_css",
    "render_search_form",
    "render_error",
    "render_results",
    "render_flight_list",
]
