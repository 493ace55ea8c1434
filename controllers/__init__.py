"""
Controllers layer - orchestration and session state management.
"""

from controllers.dashboard_controller import DashboardController
from controllers.ingredients_controller import IngredientsController
from controllers.recipes_controller import RecipesController
from controllers.expiration_controller import ExpirationController
from controllers.shopping_controller import ShoppingController
from controllers.meal_planning_controller import MealPlanningController

__all__ = [
    "DashboardController",
    "IngredientsController",
    "RecipesController",
    "ExpirationController",
    "ShoppingController",
    "MealPlanningController",
]
