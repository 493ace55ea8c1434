"""
Views layer - UI presentation components.
"""

from views.dashboard_view import DashboardView
from views.ingredients_view import IngredientsView
from views.recipes_view import RecipesView
from views.expiration_view import ExpirationView
from views.shopping_view import ShoppingView
from views.meal_planning_view import MealPlanningView

__all__ = [
    "DashboardView",
    "IngredientsView",
    "RecipesView",
    "ExpirationView",
    "ShoppingView",
    "MealPlanningView",
]
