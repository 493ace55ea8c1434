"""
Sidebar components.
"""

from views.components.sidebar.navigation import (
    NavItem,
    get_nav_items,
    render_navigation_sidebar,
)

__all__ = [
    "NavItem",
    "get_nav_items",
    "render_navigation_sidebar",
]
