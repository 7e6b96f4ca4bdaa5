"""Tab 1: Overview: headline benefit, category split and hours comparison."""

import streamlit as st

from config.defaults import CATEGORIES
from data.session_store import get_state, dispatch
from data.validator import max_percent_for, validate_split
from engine.allocation_engine import flow_links
from engine.explainer import explain_benefit
from engine.model_engine import compute_state, process_rows, hours_per_thousand_cartons
from components.metrics_cards import render_headline_cards, render_alert_card
from components.charts import (
    compare_hours_bar, delta_hours_bar, benefit_waterfall,
    carton_flow_sankey, intensity_bar, hours_share_donut,
)
from components.tables import hours_table, render_styled_table


def _render_split_controls(state):
    total = sum(state.split.get(k, 0.0) for k in CATEGORIES)
    col1, col2 = st.columns([3, 1])
    col1.subheader("Category split")
    col2.caption(f"Remaining: {max(0, 100 - round(total * 100))}%")

    cols = st.columns(4)
    for i, category in enumerate(CATEGORIES):
        ceiling = max_percent_for(state.split, category)
        current = min(round(state.split.get(category, 0.0) * 100), ceiling)
        with cols[i % 4]:
            # A slider needs min < max, so a full split shows a locked 0-1 range
            pct = st.slider(
                category, min_value=0, max_value=max(1, ceiling),
                value=current, step=1, key=f"w_share_{category}",
                disabled=ceiling == 0,
            )
        if pct != current:
            dispatch({"type": "set_share", "category": category, "value": pct / 100})

    for w in validate_split(state.split).warnings:
        st.caption(w)


def render(sidebar_state):
    """Render the Overview tab."""
    st.header("Overview")

    state = get_state()
    totals = compute_state(state)

    render_headline_cards(totals, state.inputs.stores)
    if totals.benefit_hours < 0:
        render_alert_card(
            f"The new model needs {-totals.benefit_hours:,.0f} more hours per store each week than current.",
            "warning",
        )
    if state.forecast:
        render_alert_card(
            f"Imported forecast hours are replacing rate-based hours for: {', '.join(sorted(state.forecast))}.",
            "info",
        )
    with st.expander("How the benefit is calculated"):
        for line in explain_benefit(totals, state.inputs.hourly_rate, state.inputs.stores,
                                    state.inputs.weeks_per_year):
            st.write(line)

    st.metric("Network annual savings", f"A${totals.network_annual_savings:,.0f}",
              delta=f"{totals.network_annual_benefit_hours:,.0f} hrs/year", delta_color="off")

    st.divider()
    _render_split_controls(state)

    links = flow_links(totals.category_cartons, "new", state.rule_config)
    if links:
        st.plotly_chart(carton_flow_sankey(links), use_container_width=True)
    else:
        st.info("No cartons to route. Enter cartons delivered and a category split.")

    per_thousand = hours_per_thousand_cartons(
        totals, state.new_cfg, state.issues, state.issue_toggles, state.mitigation,
    )
    st.plotly_chart(intensity_bar(per_thousand), use_container_width=True)

    st.divider()
    rows = process_rows(totals, include_issues=sidebar_state.include_issues)

    col1, col2 = st.columns(2)
    with col1:
        st.plotly_chart(compare_hours_bar(rows), use_container_width=True)
    with col2:
        st.plotly_chart(delta_hours_bar(rows), use_container_width=True)

    col1, col2 = st.columns([3, 2])
    with col1:
        st.plotly_chart(benefit_waterfall(totals), use_container_width=True)
    with col2:
        st.plotly_chart(hours_share_donut(totals.new_hours), use_container_width=True)

    render_styled_table(hours_table(rows), title="Weekly hours by process")
