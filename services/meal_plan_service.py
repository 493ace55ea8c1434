"""
Meal Plan Service - weekly slot handling for meal plan entries.

This service is pure Python with no Streamlit dependencies.

The API stores each entry's slot as a single string in the ``date``
field, "<Day>_<mealType>" (e.g. "Monday_breakfast"). This module builds
and splits those keys and arranges entries into a 7 x 3 week grid.
"""

import logging
from typing import Iterable, Optional

from models import MealPlan, MealPlanEntry, Recipe

logger = logging.getLogger(__name__)

DAYS_OF_WEEK = [
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
]

# Meal type value -> display label
MEAL_TYPES = {
    "breakfast": "Breakfast",
    "lunch": "Lunch",
    "dinner": "Dinner",
}

SLOT_SEPARATOR = "_"
UNKNOWN_RECIPE = "Unknown Recipe"


def compose_slot_key(day: str, meal_type: str) -> str:
    """Build the composite slot key stored by the API."""
    return f"{day}{SLOT_SEPARATOR}{meal_type}"


def parse_slot_key(key: Optional[str]) -> tuple[str, str]:
    """
    Split a slot key into (day, meal_type).

    Raises:
        ValueError: If the key is missing, has no separator or names an unknown
            day or meal type
    """
    day, sep, meal_type = (key or "").partition(SLOT_SEPARATOR)
    if not sep:
        raise ValueError(f"Meal plan key {key!r} is not '<Day>_<mealType>'")
    if day not in DAYS_OF_WEEK:
        raise ValueError(f"Unknown day {day!r} in meal plan key {key!r}")
    if meal_type not in MEAL_TYPES:
        raise ValueError(f"Unknown meal type {meal_type!r} in meal plan key {key!r}")
    return day, meal_type


def to_entry(meal_plan: MealPlan) -> MealPlanEntry:
    day, meal_type = parse_slot_key(meal_plan.date)
    return MealPlanEntry(
        id=meal_plan.id or "",
        day=day,
        meal_type=meal_type,
        recipe_id=meal_plan.recipe_id,
    )


def to_entries(meal_plans: Iterable[MealPlan]) -> list[MealPlanEntry]:
    """Convert API entries to view entries, skipping malformed slot keys."""
    entries = []
    for plan in meal_plans:
        try:
            entries.append(to_entry(plan))
        except ValueError as e:
            logger.warning(f"Skipping meal plan {plan.id}: {e}")
    return entries


def build_payload(day: str, meal_type: str, recipe_id: str) -> dict:
    """
    Request body for creating or updating a slot.

    Raises:
        ValueError: If recipe_id is not numeric
    """
    return {
        "date": compose_slot_key(day, meal_type),
        "recipeId": int(recipe_id),
    }


def find_entry(
    entries: Iterable[MealPlanEntry],
    day: str,
    meal_type: str,
) -> Optional[MealPlanEntry]:
    """First entry occupying the given slot, if any."""
    for entry in entries:
        if entry.day == day and entry.meal_type == meal_type:
            return entry
    return None


def recipe_name(recipes: Iterable[Recipe], recipe_id: str) -> str:
    for recipe in recipes:
        if recipe.id == recipe_id:
            return recipe.name
    return UNKNOWN_RECIPE


def build_week_grid(
    entries: list[MealPlanEntry],
) -> dict[str, dict[str, Optional[MealPlanEntry]]]:
    """
    Arrange entries by meal type, then day.

    Returns:
        {meal_type: {day: entry or None}} covering every slot of the week
    """
    return {
        meal_type: {day: find_entry(entries, day, meal_type) for day in DAYS_OF_WEEK}
        for meal_type in MEAL_TYPES
    }
