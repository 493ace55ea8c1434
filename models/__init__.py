"""
Models Package - pantry API entities.
"""

from models.entities import (
    Ingredient,
    Recipe,
    MealPlan,
    MealPlanEntry,
    ShoppingItem,
    format_quantity,
)

__all__ = [
    "Ingredient",
    "Recipe",
    "MealPlan",
    "MealPlanEntry",
    "ShoppingItem",
    "format_quantity",
]
