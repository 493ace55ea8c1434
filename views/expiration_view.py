"""
Expiration View - ingredients bucketed by how soon they expire.
"""

import streamlit as st

from controllers.expiration_controller import ExpirationController
from services.expiration_service import STATUS_CARD_TITLES
from views.components.expiration_table import render_expiration_table
from views.components.sidebar import render_navigation_sidebar
from views.components.stat_cards import render_stat_cards, render_status_badge


class ExpirationView:
    """View for the expiration tracking page."""

    def __init__(self):
        self.controller = ExpirationController()

    def render(self):
        """Main render method."""
        render_navigation_sidebar("expiration")

        st.title("Expiration Tracking")
        st.markdown("Monitor ingredient expiration dates")

        with st.spinner("Loading..."):
            self.controller.ensure_loaded()

        error = self.controller.get_load_error()
        if error:
            st.error(f"Error: {error}")
            if st.button("Retry"):
                self.controller.reload()
                st.rerun()
            return

        counts = self.controller.get_status_counts()
        render_stat_cards([
            (title, counts[status]) for status, title in STATUS_CARD_TITLES.items()
        ])

        with st.container(border=True):
            col_title, col_legend = st.columns([2, 3])
            with col_title:
                st.markdown("### Expiration Dates")
                st.caption("Track when your ingredients will expire")
            with col_legend:
                legend = st.columns(len(STATUS_CARD_TITLES))
                for column, status in zip(legend, STATUS_CARD_TITLES):
                    with column:
                        render_status_badge(status.label, status.background, status.foreground)

            render_expiration_table(self.controller.get_rows())
