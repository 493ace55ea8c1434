"""
Shopping list progress component.
"""

import streamlit as st


def render_shopping_progress(remaining: int, checked: int, progress: float):
    """
    Render the to-buy / checked counters and the progress bar.

    Args:
        remaining: Number of unchecked items
        checked: Number of checked items
        progress: Fraction of items checked off (0 for an empty list)
    """
    total = remaining + checked
    col_buy, col_done = st.columns(2)
    col_buy.metric("To Buy", remaining)
    col_done.metric("Checked", checked)

    st.progress(progress, text=f"{checked} of {total} items checked off")
