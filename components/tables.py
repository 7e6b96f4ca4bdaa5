"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd
from typing import List, Optional


def render_styled_table(
    df: pd.DataFrame,
    title: Optional[str] = None,
    height: Optional[int] = None,
    use_container_width: bool = True,
):
    """Render a styled, non-editable dataframe."""
    if title:
        st.subheader(title)
    st.dataframe(df, height=height, use_container_width=use_container_width)


def hours_table(rows: List[dict]) -> pd.DataFrame:
    """Process rows -> display frame with a total line."""
    df = pd.DataFrame(rows)[["label", "current", "new", "delta"]]
    df.columns = ["Process", "Current Hours", "New Hours", "Hours Saved"]
    total = pd.DataFrame([{
        "Process": "Total",
        "Current Hours": df["Current Hours"].sum(),
        "New Hours": df["New Hours"].sum(),
        "Hours Saved": df["Hours Saved"].sum(),
    }])
    return pd.concat([df, total], ignore_index=True)


def render_comparison_table(df: pd.DataFrame, change_columns: Optional[List[str]] = None):
    """Render a comparison table with positive/negative highlighting."""
    def color_change(val):
        try:
            v = float(val)
            if v > 0:
                return "color: #155724; font-weight: bold"
            elif v < 0:
                return "color: #cc0000; font-weight: bold"
        except (ValueError, TypeError):
            pass
        return ""

    cols = [c for c in (change_columns or []) if c in df.columns]
    numeric = df.select_dtypes("number").columns
    styled = df.style.format("{:,.1f}", subset=numeric)
    if cols:
        styled = styled.map(color_change, subset=cols)
    st.dataframe(styled, use_container_width=True, hide_index=True)
