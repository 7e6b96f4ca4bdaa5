"""Reusable KPI metric card widgets."""

import streamlit as st

from engine.model_engine import format_number
from models.totals import ComputedTotals


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally delta, delta_color.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(
                label=m["label"],
                value=m["value"],
                delta=m.get("delta"),
                delta_color=m.get("delta_color", "normal"),
            )


def render_headline_cards(totals: ComputedTotals, stores: int):
    """Current / new hours, per-store benefit and network benefit."""
    benefit = totals.benefit_hours
    render_metric_row([
        {"label": "Total Current Hours", "value": format_number(totals.total_current_hours)},
        {"label": "Total New Model Hours", "value": format_number(totals.total_new_hours)},
        {"label": "Estimated Benefit (per store)", "value": f"{format_number(benefit)} hrs",
         "delta": f"A${format_number(totals.weekly_savings)}/week",
         "delta_color": "normal" if benefit >= 0 else "inverse"},
        {"label": f"Network Benefit ({stores} stores)",
         "value": f"{format_number(totals.network_weekly_benefit_hours)} hrs",
         "delta": f"A${format_number(totals.network_weekly_savings)}/week",
         "delta_color": "normal" if benefit >= 0 else "inverse"},
    ])


def render_alert_card(message: str, level: str = "warning"):
    """Render an alert card with appropriate styling."""
    if level == "error":
        st.error(message, icon="🔴")
    elif level == "warning":
        st.warning(message, icon="🟡")
    else:
        st.info(message, icon="🔵")
