"""
Food Manager - Dashboard

Household pantry dashboard: ingredients, recipes, expiration dates,
shopping list and weekly meal plan, backed by the pantry REST API.
"""

import streamlit as st

from config import configure_logging, get_settings

# Page configuration (must be first Streamlit command)
st.set_page_config(
    page_title=get_settings().app_title,
    page_icon="🏠",
    layout="wide"
)

configure_logging()

from views.dashboard_view import DashboardView

view = DashboardView()
view.render()
