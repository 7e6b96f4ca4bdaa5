"""Typed wrapper around st.session_state holding the single ModelState."""

import logging
from typing import Optional

import streamlit as st

from engine.scenario_engine import apply_action
from models.state import ModelState

logger = logging.getLogger(__name__)


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "model_state": ModelState(),
        "forecast_file_name": None,
        "forecast_upload_id": None,
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_state() -> ModelState:
    return st.session_state.get("model_state") or ModelState()


def get_forecast_file_name() -> Optional[str]:
    return st.session_state.get("forecast_file_name")


# --- Updates ---

def dispatch(action: dict) -> ModelState:
    """Apply an action to the stored state and keep the result."""
    new_state = apply_action(get_state(), action)
    st.session_state["model_state"] = new_state
    logger.debug("Applied action %s", action.get("type"))
    return new_state


def store_forecast(forecast: dict, file_name: str):
    dispatch({"type": "set_forecast", "forecast": forecast})
    st.session_state["forecast_file_name"] = file_name
    logger.info("Forecast override loaded from %s (%d processes)", file_name, len(forecast))


def claim_upload(upload_id) -> bool:
    """True the first time an uploaded file is seen; later reruns with the same file return False."""
    if upload_id is None or upload_id == st.session_state.get("forecast_upload_id"):
        return False
    st.session_state["forecast_upload_id"] = upload_id
    return True


def clear_forecast():
    dispatch({"type": "clear_forecast"})
    st.session_state["forecast_file_name"] = None


def reset_state():
    """Back to defaults; widget keys (prefixed "w_") are dropped so inputs redraw."""
    for key in [k for k in st.session_state.keys() if str(k).startswith("w_")]:
        del st.session_state[key]
    st.session_state["model_state"] = ModelState()
    st.session_state["forecast_file_name"] = None
    st.session_state["forecast_upload_id"] = None
