"""
Reusable UI components.
"""

from views.components.stat_cards import render_stat_cards, render_status_badge
from views.components.ingredient_row import render_ingredient_table_header, render_ingredient_row
from views.components.recipe_card import render_recipe_card
from views.components.expiration_table import render_expiration_table
from views.components.shopping_item import render_shopping_item, render_add_item_form
from views.components.shopping_stats import render_shopping_progress
from views.components.meal_grid import render_week_grid

# Sidebar components
from views.components.sidebar import render_navigation_sidebar

__all__ = [
    # Cards
    "render_stat_cards",
    "render_status_badge",
    # Ingredients
    "render_ingredient_table_header",
    "render_ingredient_row",
    # Recipes
    "render_recipe_card",
    # Expiration
    "render_expiration_table",
    # Shopping
    "render_shopping_item",
    "render_add_item_form",
    "render_shopping_progress",
    # Meal planning
    "render_week_grid",
    # Sidebar
    "render_navigation_sidebar",
]
