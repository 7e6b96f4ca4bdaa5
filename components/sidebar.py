"""Global sidebar controls: weekly inputs, allocation preset and model rules."""

import streamlit as st
from dataclasses import dataclass

from config.defaults import ALLOCATION_PRESETS, FORECAST_TARGETS
from data.session_store import get_state, dispatch, reset_state, get_forecast_file_name


@dataclass
class SidebarState:
    allocation_preset: str
    include_issues: bool


def _number(label: str, field: str, value: float, step: float, min_value: float = 0.0):
    new_value = st.number_input(label, min_value=min_value, value=float(value), step=step, key=f"w_{field}")
    if new_value != value:
        dispatch({"type": "set_input", "field": field, "value": new_value})


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    with st.sidebar:
        st.title("Store Operating Model")
        st.divider()

        state = get_state()
        inputs = state.inputs

        st.subheader("Model inputs")
        _number("Cartons delivered (weekly)", "cartons_delivered", inputs.cartons_delivered, 100.0)
        _number("Online units (weekly)", "online_units", inputs.online_units, 50.0)
        _number("Average hourly rate (AHR)", "hourly_rate", inputs.hourly_rate, 0.5)
        _number("Stores (network)", "stores", inputs.stores, 1.0, min_value=1.0)
        _number("Weeks per year", "weeks_per_year", inputs.weeks_per_year, 1.0)

        st.divider()
        st.subheader("Model rules")

        presets = list(ALLOCATION_PRESETS)
        current_preset = state.rule_config.get("allocation_preset", presets[0])
        preset = st.selectbox(
            "Allocation preset",
            options=presets,
            format_func=lambda x: ALLOCATION_PRESETS[x]["label"],
            index=presets.index(current_preset),
            key="w_allocation_preset",
        )
        if preset != current_preset:
            dispatch({"type": "set_rule", "key": "allocation_preset", "value": preset})

        clamp = st.toggle(
            "Floor benefit at zero",
            value=bool(state.rule_config.get("clamp_benefit")),
            key="w_clamp_benefit",
        )
        if clamp != bool(state.rule_config.get("clamp_benefit")):
            dispatch({"type": "set_rule", "key": "clamp_benefit", "value": clamp})

        target = state.rule_config.get("forecast_target", FORECAST_TARGETS[0])
        new_target = st.selectbox(
            "Forecast hours replace",
            options=FORECAST_TARGETS,
            index=FORECAST_TARGETS.index(target),
            key="w_forecast_target",
        )
        if new_target != target:
            dispatch({"type": "set_rule", "key": "forecast_target", "value": new_target})

        include_issues = st.toggle("Show issue-adjusted hours", value=True, key="w_include_issues")

        st.divider()
        file_name = get_forecast_file_name()
        if file_name:
            st.success(f"Forecast loaded: {file_name}")
        else:
            st.caption("No forecast imported")

        if st.button("Reset to defaults", use_container_width=True):
            reset_state()
            st.rerun()

    return SidebarState(
        allocation_preset=preset,
        include_issues=include_issues,
    )
