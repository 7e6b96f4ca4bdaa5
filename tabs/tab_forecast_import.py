"""Tab 4: Forecast Import: load forecast roster hours from a workbook."""

import logging

import pandas as pd
import streamlit as st

from data.loader import parse_forecast, ForecastParseError
from data.sample_data import generate_forecast_df
from data.session_store import (
    get_state, store_forecast, clear_forecast, claim_upload, get_forecast_file_name,
)
from data.validator import validate_forecast
from models.process import process_label

logger = logging.getLogger(__name__)


def render(sidebar_state):
    """Render the Forecast Import tab."""
    st.header("Forecast Import")
    st.caption(
        "Upload a workbook with a 'Forecast Roster Hours' sheet (or use the first sheet): "
        "process names in column A, weekly hours in column B. Imported hours replace the "
        "rate-based figure for any process not on a roster override."
    )

    uploaded = st.file_uploader("Forecast workbook", type=["xlsx", "xls", "csv"], key="w_forecast_file")
    # Each upload is parsed once, so a cleared forecast stays cleared
    if uploaded is not None and claim_upload(getattr(uploaded, "file_id", uploaded.name)):
        try:
            forecast = parse_forecast(uploaded)
        except ForecastParseError as e:
            logger.warning("Forecast import failed for %s: %s", uploaded.name, e)
            st.error(str(e))
        else:
            result = validate_forecast(forecast)
            for w in result.warnings:
                st.warning(w)
            store_forecast(forecast, uploaded.name)
            st.success(f"Imported hours for {len(forecast)} process(es).")

    state = get_state()
    if state.forecast:
        st.subheader(f"Active forecast ({get_forecast_file_name() or 'manual'})")
        df = pd.DataFrame([
            {"Process": process_label(p), "Forecast Hours": h} for p, h in state.forecast.items()
        ])
        st.dataframe(df, use_container_width=True, hide_index=True)
        st.caption(f"Applies to: {state.rule_config.get('forecast_target')} model")
        if st.button("Clear forecast"):
            clear_forecast()
            st.rerun()

    with st.expander("Expected layout"):
        st.dataframe(generate_forecast_df(), use_container_width=True, hide_index=True)
