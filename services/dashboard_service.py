"""
Dashboard Service - collection counts for the overview page.

This service is pure Python with no Streamlit dependencies.
"""

import logging
from dataclasses import dataclass

from services.meal_plan_service import to_entries
from services.pantry_api import PantryAPI

logger = logging.getLogger(__name__)


@dataclass
class DashboardCounts:
    """Size of each collection shown on the dashboard."""
    ingredients: int = 0
    recipes: int = 0
    expiring: int = 0
    shopping: int = 0
    meal_plans: int = 0

    def as_series(self) -> dict[str, int]:
        """Chart-ready {label: count}, in display order."""
        return {
            "Ingredients": self.ingredients,
            "Recipes": self.recipes,
            "Expiring": self.expiring,
            "Shopping": self.shopping,
            "Meal Plans": self.meal_plans,
        }


class DashboardService:
    """Loads and aggregates the dashboard counts."""

    def __init__(self, api: PantryAPI):
        self.api = api

    def get_counts(self, expiring_days: int) -> DashboardCounts:
        """
        Fetch all collections and count them.

        Meal plans are counted when their slot key is a valid weekly slot.

        Raises:
            PantryAPIError: If any of the requests fails
        """
        ingredients = self.api.list_ingredients()
        recipes = self.api.list_recipes()
        expiring = self.api.list_expiring(expiring_days)
        shopping = self.api.list_shopping_items()
        meal_plans = self.api.list_meal_plans()

        counts = DashboardCounts(
            ingredients=len(ingredients),
            recipes=len(recipes),
            expiring=len(expiring),
            shopping=len(shopping),
            meal_plans=len(to_entries(meal_plans)),
        )
        logger.debug(f"Dashboard counts: {counts}")
        return counts
