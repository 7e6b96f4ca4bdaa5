"""Tab 2: Process Explorer: per-process parameters for the current and new models."""

import pandas as pd
import streamlit as st

from config.defaults import PROCESSES, UNIT_TYPES, ALLOCATION_PRESETS
from data.session_store import get_state, dispatch
from engine.explainer import explain_process
from engine.model_engine import compute_state
from engine.scenario_engine import compare_presets
from models.process import process_label
from components.tables import render_comparison_table


def _render_process_editor(state, model: str):
    cfgs = state.current_cfg if model == "current" else state.new_cfg
    cols = st.columns(2)
    for i, p in enumerate(PROCESSES):
        cfg = cfgs[p]
        with cols[i % 2], st.container(border=True):
            st.markdown(f"**{process_label(p)}**")
            c1, c2 = st.columns(2)
            unit = c1.radio("Unit", UNIT_TYPES, index=UNIT_TYPES.index(cfg.unit),
                            horizontal=True, key=f"w_{model}_{p}_unit")
            use_roster = c2.toggle("Use roster", value=cfg.use_roster, key=f"w_{model}_{p}_roster_on")
            rate = c1.number_input("Rate / 1000", min_value=0.0, value=float(cfg.rate),
                                   step=1.0, key=f"w_{model}_{p}_rate")
            roster = c2.number_input("Roster hours", min_value=0.0, value=float(cfg.roster),
                                     step=1.0, key=f"w_{model}_{p}_roster")

        changes = {"unit": unit, "use_roster": use_roster, "rate": rate, "roster": roster}
        for field, value in changes.items():
            if value != getattr(cfg, field):
                dispatch({"type": "set_process", "model": model, "process": p,
                          "field": field, "value": value})


def render(sidebar_state):
    """Render the Process Explorer tab."""
    st.header("Process Explorer")

    st.subheader("Per-process parameters (Current)")
    _render_process_editor(get_state(), "current")

    st.subheader("Per-process parameters (New)")
    _render_process_editor(get_state(), "new")

    st.divider()
    state = get_state()
    totals = compute_state(state)

    st.subheader("Explain a process")
    col1, col2 = st.columns(2)
    process = col1.selectbox("Process", PROCESSES, format_func=process_label, key="w_explain_process")
    model = col2.radio("Model", ["current", "new"], horizontal=True, key="w_explain_model")
    cfg = (state.current_cfg if model == "current" else state.new_cfg)[process]
    for line in explain_process(process, model, cfg, totals, state.issues,
                                state.issue_toggles, state.mitigation, state.rule_config):
        st.text(line)

    st.divider()
    st.subheader("Allocation preset comparison")
    st.caption(", ".join(ALLOCATION_PRESETS[n]["label"] for n in ALLOCATION_PRESETS))
    df = pd.DataFrame(compare_presets(state))
    render_comparison_table(df, [c for c in df.columns if c.endswith("Benefit")])
