"""
Dashboard View - overview of every pantry collection.

Displays one count per collection as metric cards and a bar chart.
"""

import plotly.express as px
import streamlit as st

from controllers.dashboard_controller import DashboardController
from views.components.sidebar import render_navigation_sidebar
from views.components.stat_cards import render_stat_cards

BAR_COLOR = "#4f46e5"


class DashboardView:
    """View for the dashboard page."""

    def __init__(self):
        self.controller = DashboardController()

    def render(self) -> None:
        """Render the dashboard."""
        render_navigation_sidebar("dashboard")

        st.title("Dashboard")
        st.markdown("Overview of your pantry, recipes and plans")

        self.controller.ensure_loaded()

        error = self.controller.get_load_error()
        if error:
            st.error(f"Error: {error}")
            if st.button("Retry"):
                self.controller.reload()
                st.rerun()
            return

        counts = self.controller.get_counts()
        if counts is None:
            return

        series = counts.as_series()
        render_stat_cards(
            list(series.items()),
            help_texts={
                "Expiring": f"Expiring within {self.controller.get_expiring_days()} days",
            },
        )

        st.markdown("---")
        self._render_chart(series)

    def _render_chart(self, series: dict[str, int]) -> None:
        """Render the counts as a bar chart."""
        fig = px.bar(
            x=list(series.keys()),
            y=list(series.values()),
            text=list(series.values()),
            labels={"x": "", "y": "Count"},
        )
        fig.update_traces(marker_color=BAR_COLOR, textposition="outside")
        fig.update_layout(xaxis_tickangle=-30, showlegend=False)
        st.plotly_chart(fig, use_container_width=True)
