"""Plotly chart builders for the Store Operating Model."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import Dict, List

from config.defaults import (
    CATEGORIES, NODE_COLORS, CURRENT_COLOR, NEW_COLOR, INCREASE_COLOR,
)
from models.process import process_label
from models.totals import ComputedTotals


def compare_hours_bar(rows: List[dict], title: str = "Current vs New hours by process") -> go.Figure:
    """Grouped bars of current and new hours per process."""
    df = pd.DataFrame(rows)
    fig = px.bar(
        df, x="label", y=["current", "new"],
        barmode="group",
        labels={"value": "Hours / week", "label": "Process", "variable": ""},
        title=title,
        color_discrete_map={"current": CURRENT_COLOR, "new": NEW_COLOR},
    )
    fig.update_layout(legend_title_text="", height=380)
    return fig


def delta_hours_bar(rows: List[dict], title: str = "Benefit by process (Δ hours)") -> go.Figure:
    """Horizontal bars of hours saved (green) or added (red) per process."""
    df = pd.DataFrame(rows).sort_values("delta")
    colors = [NEW_COLOR if d >= 0 else INCREASE_COLOR for d in df["delta"]]
    fig = go.Figure(go.Bar(
        x=df["delta"], y=df["label"],
        orientation="h",
        marker_color=colors,
        texttemplate="%{x:,.0f}",
        textposition="auto",
    ))
    fig.update_layout(title=title, xaxis_title="Hours saved / week", height=380)
    return fig


def hours_share_donut(hours: Dict[str, float], title: str = "New model hours mix") -> go.Figure:
    """Donut of each process's share of total hours."""
    labels = [process_label(p) for p in hours]
    fig = go.Figure(data=[go.Pie(
        labels=labels,
        values=[max(0.0, v) for v in hours.values()],
        hole=0.6,
        marker_colors=[NODE_COLORS.get(p, "#94a3b8") for p in hours],
        textinfo="percent+label",
    )])
    total = sum(hours.values())
    fig.update_layout(
        title=title,
        height=350,
        annotations=[dict(text=f"{total:,.0f} hrs", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig


def benefit_waterfall(totals: ComputedTotals, title: str = "Current → New hours") -> go.Figure:
    """Waterfall from current total hours to new total through per-process changes."""
    labels = ["Current"]
    measures = ["absolute"]
    values = [totals.total_current_hours]
    for p, cur in totals.current_hours.items():
        change = totals.new_hours[p] - cur
        if abs(change) < 0.5:
            continue
        labels.append(process_label(p))
        measures.append("relative")
        values.append(change)
    labels.append("New")
    measures.append("total")
    values.append(totals.total_new_hours)

    fig = go.Figure(go.Waterfall(
        x=labels, y=values, measure=measures,
        decreasing={"marker": {"color": NEW_COLOR}},
        increasing={"marker": {"color": INCREASE_COLOR}},
        totals={"marker": {"color": CURRENT_COLOR}},
        texttemplate="%{y:,.0f}",
    ))
    fig.update_layout(title=title, yaxis_title="Hours / week", height=380)
    return fig


def carton_flow_sankey(links: List[dict], title: str = "Carton flow (new model)") -> go.Figure:
    """Sankey of Decant -> category -> process carton links."""
    names = []
    for link in links:
        for n in (link["source"], link["target"]):
            if n not in names:
                names.append(n)
    index = {n: i for i, n in enumerate(names)}

    fig = go.Figure(go.Sankey(
        node=dict(
            label=[process_label(n) for n in names],
            color=[NODE_COLORS.get(n, "#94a3b8") for n in names],
            pad=18, thickness=14,
        ),
        link=dict(
            source=[index[l["source"]] for l in links],
            target=[index[l["target"]] for l in links],
            value=[l["value"] for l in links],
            color=[_fade(NODE_COLORS.get(l["source"] if l["source"] in CATEGORIES else l["target"], "#94a3b8"))
                   for l in links],
        ),
    ))
    fig.update_layout(title=title, height=480)
    return fig


def intensity_bar(per_thousand: Dict[str, float], title: str = "Hours / 1000 cartons (new model)") -> go.Figure:
    fig = go.Figure(go.Bar(
        x=[process_label(p) for p in per_thousand],
        y=list(per_thousand.values()),
        marker_color=[NODE_COLORS.get(p, "#94a3b8") for p in per_thousand],
        texttemplate="%{y:,.0f}",
    ))
    fig.update_layout(title=title, yaxis_title="Hours", height=320)
    return fig


def _fade(hex_color: str, alpha: float = 0.4) -> str:
    h = hex_color.lstrip("#")
    r, g, b = int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)
    return f"rgba({r},{g},{b},{alpha})"
