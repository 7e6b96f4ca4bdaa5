"""Tab 3: Issue Scenarios: toggles, mitigation and issue impact editing."""

import pandas as pd
import streamlit as st

from config.defaults import PROCESSES
from data.session_store import get_state, dispatch
from engine.model_engine import compute_state
from models.process import process_label


def _multiplier_frame(totals) -> pd.DataFrame:
    return pd.DataFrame([
        {
            "Process": process_label(p),
            "Current x": totals.current_multipliers[p],
            "New x": totals.new_multipliers[p],
            "Current Hours": totals.current_hours[p],
            "New Hours": totals.new_hours[p],
        }
        for p in PROCESSES
    ])


def render(sidebar_state):
    """Render the Issue Scenarios tab."""
    st.header("Issue Scenarios")
    state = get_state()

    cols = st.columns(len(state.issues) or 1)
    for col, issue in zip(cols, state.issues):
        with col, st.container(border=True):
            enabled = st.toggle(issue.name, value=bool(state.issue_toggles.get(issue.issue_id)),
                                key=f"w_issue_{issue.issue_id}")
            impacts = ", ".join(f"{process_label(p)} {v:+.0%}" for p, v in issue.impact.items())
            st.caption(impacts or "No impacts")
        if enabled != bool(state.issue_toggles.get(issue.issue_id)):
            dispatch({"type": "toggle_issue", "issue_id": issue.issue_id, "enabled": enabled})

    pct = st.slider("Mitigation (New model)", 0, 100, round(state.mitigation * 100), key="w_mitigation")
    if pct != round(state.mitigation * 100):
        dispatch({"type": "set_mitigation", "value": pct / 100})

    st.divider()
    st.subheader("Edit issue impacts")
    state = get_state()
    names = {i.issue_id: i.name for i in state.issues}
    col1, col2, col3 = st.columns(3)
    issue_id = col1.selectbox("Issue", list(names), format_func=names.get, key="w_edit_issue")
    process = col2.selectbox("Process", PROCESSES, format_func=process_label, key="w_edit_process")
    impact_pct = col3.number_input("Impact %", min_value=-100.0, max_value=200.0, value=5.0,
                                   step=1.0, key="w_edit_impact")

    b1, b2 = st.columns(2)
    if b1.button("Add / update impact", use_container_width=True):
        dispatch({"type": "add_issue_impact", "issue_id": issue_id,
                  "process": process, "impact": impact_pct / 100})
        st.rerun()
    if b2.button("Remove impact", use_container_width=True):
        dispatch({"type": "remove_issue_impact", "issue_id": issue_id, "process": process})
        st.rerun()

    st.divider()
    totals = compute_state(get_state())
    st.subheader("Issue multipliers")
    st.dataframe(
        _multiplier_frame(totals).style.format({
            "Current x": "{:.3f}", "New x": "{:.3f}",
            "Current Hours": "{:,.1f}", "New Hours": "{:,.1f}",
        }),
        use_container_width=True, hide_index=True,
    )
