"""
Meal Planning Controller - weekly meal plan page.

This controller handles:
- Loading recipes (for names and the recipe picker) and meal plan entries
- Assigning a recipe to a (day, meal type) slot: PUT when the slot is
  already taken, POST otherwise
- Removing entries from the plan
- The add-meal dialog draft, so clicking an empty slot pre-selects it
"""

import logging
from typing import Optional

from models import MealPlanEntry, Recipe
from services import meal_plan_service
from services.exceptions import PantryAPIError
from services.meal_plan_service import DAYS_OF_WEEK, MEAL_TYPES
from controllers.base import PageController

logger = logging.getLogger(__name__)

DEFAULT_DAY = DAYS_OF_WEEK[0]
DEFAULT_MEAL_TYPE = next(iter(MEAL_TYPES))


def _initial_draft() -> dict:
    return {"day": DEFAULT_DAY, "meal_type": DEFAULT_MEAL_TYPE}


class MealPlanningController(PageController):
    """Controller for the meal planning page."""

    STATE_KEY = "meal_planning"

    def _default_state(self) -> dict:
        return {
            "recipes": [],
            "entries": [],
            "draft": _initial_draft(),
        }

    def _load(self):
        self.page_state["recipes"] = self.api.list_recipes()
        self.page_state["entries"] = meal_plan_service.to_entries(
            self.api.list_meal_plans()
        )

    # ==========================================
    # Session State Accessors
    # ==========================================

    def get_recipes(self) -> list[Recipe]:
        return self.page_state["recipes"]

    def get_entries(self) -> list[MealPlanEntry]:
        return self.page_state["entries"]

    def get_week_grid(self) -> dict[str, dict[str, Optional[MealPlanEntry]]]:
        return meal_plan_service.build_week_grid(self.get_entries())

    def get_recipe_name(self, recipe_id: str) -> str:
        return meal_plan_service.recipe_name(self.get_recipes(), recipe_id)

    # ==========================================
    # Add-Meal Dialog
    # ==========================================

    def get_draft(self) -> dict:
        return self.page_state["draft"]

    def select_slot(self, day: str, meal_type: str):
        """Pre-select a slot in the add dialog (clicked on an empty cell)."""
        self.page_state["draft"] = {"day": day, "meal_type": meal_type}

    def reset_draft(self):
        self.page_state["draft"] = _initial_draft()

    # ==========================================
    # Mutations
    # ==========================================

    def add_meal(self, day: str, meal_type: str, recipe_id: str) -> bool:
        """
        Put a recipe in a slot, replacing whatever is there.

        A blank recipe selection is ignored.
        """
        if not recipe_id:
            return False

        try:
            payload = meal_plan_service.build_payload(day, meal_type, recipe_id)
        except ValueError:
            logger.warning(f"Recipe id {recipe_id!r} is not numeric")
            return False

        existing = meal_plan_service.find_entry(self.get_entries(), day, meal_type)
        try:
            if existing:
                saved = self.api.update_meal_plan(existing.id, payload)
            else:
                saved = self.api.create_meal_plan(payload)
        except PantryAPIError as e:
            action = "update" if existing else "create"
            self._fail(f"Could not {action} meal plan", e)
            return False

        try:
            entry = meal_plan_service.to_entry(saved)
        except ValueError as e:
            logger.error(f"Meal plan {saved.id} came back with a bad slot key: {e}")
            self.page_state["error"] = "The server returned an invalid meal plan entry"
            return False

        if existing:
            self.page_state["entries"] = [
                entry if e.id == entry.id else e for e in self.get_entries()
            ]
        else:
            self.page_state["entries"] = [*self.get_entries(), entry]

        self.reset_draft()
        return True

    def delete_meal(self, entry_id: str) -> bool:
        try:
            self.api.delete_meal_plan(entry_id)
        except PantryAPIError as e:
            self._fail("Could not delete meal plan", e)
            return False

        self.page_state["entries"] = [
            e for e in self.get_entries() if e.id != entry_id
        ]
        return True
