"""
Expiration table component.
"""

import pandas as pd
import streamlit as st

from services.expiration_service import ExpirationRow, ExpirationStatus

COLUMNS = ["Name", "Quantity", "Expiration Date", "Status", "Days Left"]

_STATUS_BY_LABEL = {status.label: status for status in ExpirationStatus}


def build_expiration_frame(rows: list[ExpirationRow]) -> pd.DataFrame:
    """Table data for the expiration page, one row per ingredient."""
    return pd.DataFrame(
        [
            {
                "Name": row.name,
                "Quantity": row.quantity,
                "Expiration Date": row.expiration_date,
                "Status": row.status.label,
                "Days Left": row.days_left_label,
            }
            for row in rows
        ],
        columns=COLUMNS,
    )


def _status_style(label: str) -> str:
    status = _STATUS_BY_LABEL.get(label)
    if status is None:
        return ""
    return f"background-color: {status.background}; color: {status.foreground}"


def render_expiration_table(rows: list[ExpirationRow]):
    """
    Render the expiration table with a colored status column.

    Args:
        rows: Rows sorted soonest-first
    """
    if not rows:
        st.info("No ingredients to track yet.")
        return

    frame = build_expiration_frame(rows)
    styled = frame.style.map(_status_style, subset=["Status"])
    st.dataframe(styled, hide_index=True, use_container_width=True)
