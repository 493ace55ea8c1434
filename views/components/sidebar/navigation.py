"""
Navigation sidebar component.

Replaces Streamlit's automatic page list (disabled in
.streamlit/config.toml) with a fixed menu that highlights the current page.
"""

from dataclasses import dataclass

import streamlit as st

APP_NAME = "Food Manager"


@dataclass
class NavItem:
    """A sidebar menu entry."""
    key: str
    label: str
    page: str
    icon: str
    active: bool = False


# key, label, script path (relative to streamlit_app.py), icon
NAV_ITEMS = [
    ("dashboard", "Dashboard", "streamlit_app.py", "🏠"),
    ("ingredients", "Ingredients", "pages/1_🥕_Ingredients.py", "🥕"),
    ("recipes", "Recipes", "pages/2_📖_Recipes.py", "📖"),
    ("expiration", "Expiration", "pages/3_⏰_Expiration.py", "⏰"),
    ("shopping_list", "Shopping List", "pages/4_🛒_Shopping_List.py", "🛒"),
    ("meal_planning", "Meal Planning", "pages/5_📅_Meal_Planning.py", "📅"),
]


def get_nav_items(active: str) -> list[NavItem]:
    """Menu entries with ``active`` flagged."""
    return [
        NavItem(key=key, label=label, page=page, icon=icon, active=(key == active))
        for key, label, page, icon in NAV_ITEMS
    ]


def render_navigation_sidebar(active: str):
    """
    Render the navigation menu.

    Args:
        active: Key of the current page (e.g. "recipes")
    """
    with st.sidebar:
        st.markdown(f"### {APP_NAME}")
        st.markdown("---")

        for item in get_nav_items(active):
            label = f"**{item.label}**" if item.active else item.label
            st.page_link(item.page, label=label, icon=item.icon)
