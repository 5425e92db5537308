"""
Flight Planner - Entry Point.

A Streamlit render surface for the flight planner client: loads the
flight catalog, submits route searches ranked by cost or time and
shows the ranked itineraries returned by the backend.

Usage:
    streamlit run app.py
"""

import logging

from dashboard import run_dashboard
from dashboard.components.styles import apply_custom_css, apply_page_config

# Configure logging for console output
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Apply Streamlit page configuration (must be first st call)
apply_page_config()
apply_custom_css()

# Run the planner view
run_dashboard()
