"""
Metric card row and status badge components.
"""

from html import escape
from typing import Optional

import streamlit as st


def render_stat_cards(cards: list[tuple[str, int]], help_texts: Optional[dict[str, str]] = None):
    """
    Render a row of metric cards, one column per card.

    Args:
        cards: (title, value) pairs in display order
        help_texts: Optional tooltip per title
    """
    help_texts = help_texts or {}
    columns = st.columns(len(cards))
    for column, (title, value) in zip(columns, cards):
        with column:
            with st.container(border=True):
                st.metric(title, value, help=help_texts.get(title))


def status_badge_html(label: str, background: str, foreground: str) -> str:
    """Inline HTML for a colored pill."""
    return (
        f'<span style="background-color:{background};color:{foreground};'
        f'padding:2px 10px;border-radius:999px;font-size:0.8rem;font-weight:600">'
        f"{escape(label)}</span>"
    )


def render_status_badge(label: str, background: str, foreground: str):
    st.markdown(status_badge_html(label, background, foreground), unsafe_allow_html=True)
