"""Store Operating Model: Streamlit entry point."""

import logging
import os
import sys

import streamlit as st

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from components.metrics_cards import render_alert_card
from components.sidebar import render_sidebar
from data.session_store import initialize_session_state
from data.validator import validate_presets
from tabs import (
    tab_overview,
    tab_process_explorer,
    tab_issues,
    tab_forecast_import,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def check_presets():
    """Surface broken allocation presets before any tab routes cartons through them."""
    result = validate_presets()
    for error in result.errors:
        logger.error("Allocation preset check failed: %s", error)
        render_alert_card(error, "error")
    return result


def main():
    st.set_page_config(
        page_title="Kmart Store Operating Model",
        page_icon="🏭",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    initialize_session_state()
    check_presets()
    sidebar_state = render_sidebar()

    tab1, tab2, tab3, tab4 = st.tabs([
        "📊 Overview",
        "⚙️ Process Explorer",
        "⚠️ Issue Scenarios",
        "📥 Forecast Import",
    ])

    with tab1:
        tab_overview.render(sidebar_state)
    with tab2:
        tab_process_explorer.render(sidebar_state)
    with tab3:
        tab_issues.render(sidebar_state)
    with tab4:
        tab_forecast_import.render(sidebar_state)


if __name__ == "__main__":
    main()
