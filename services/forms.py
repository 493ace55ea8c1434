"""
Form Service - validation and normalization of user input.

This service is pure Python with no Streamlit dependencies.

Each ``build_*`` function turns raw form values into a model ready to be
sent to the API, or raises FormValidationError when the submit should be
ignored. Filtering helpers operate on collections already loaded in the
page.
"""

from datetime import date
from typing import Iterable, Optional, TypeVar, Union

from models import Ingredient, Recipe, ShoppingItem
from services.exceptions import FormValidationError

# Unit value -> display label
INGREDIENT_UNITS = {
    "g": "Grams (g)",
    "kg": "Kilograms (kg)",
    "ml": "Milliliters (ml)",
    "l": "Liters (l)",
    "pcs": "Pieces (pcs)",
    "tbsp": "Tablespoon (tbsp)",
    "tsp": "Teaspoon (tsp)",
}
DEFAULT_INGREDIENT_UNIT = "g"

SHOPPING_UNITS = {
    "g": "Grams (g)",
    "kg": "Kilograms (kg)",
    "ml": "Milliliters (ml)",
    "l": "Liters (l)",
    "pcs": "Pieces (pcs)",
    "box": "Box",
    "can": "Can",
    "bottle": "Bottle",
}
DEFAULT_SHOPPING_UNIT = "pcs"
DEFAULT_SHOPPING_QUANTITY = 1

RECIPE_PREVIEW_INGREDIENTS = 3

NamedT = TypeVar("NamedT", Ingredient, Recipe, ShoppingItem)


def clean_lines(lines: Union[str, Iterable[str]]) -> list[str]:
    """Strip entries and drop blank ones. A string is split on newlines."""
    if isinstance(lines, str):
        lines = lines.splitlines()
    return [line.strip() for line in lines if line and line.strip()]


def build_ingredient(
    name: str,
    quantity: float,
    unit: str = DEFAULT_INGREDIENT_UNIT,
    expiration_date: Optional[Union[date, str]] = None,
) -> Ingredient:
    """
    Validate the add-ingredient form.

    Raises:
        FormValidationError: Blank name, non-positive quantity or missing date
    """
    if not name or not name.strip():
        raise FormValidationError("Ingredient name is required")
    if quantity is None or quantity <= 0:
        raise FormValidationError("Quantity must be greater than zero")
    if not expiration_date:
        raise FormValidationError("Expiration date is required")

    if isinstance(expiration_date, date):
        expiration_date = expiration_date.isoformat()

    return Ingredient(
        name=name.strip(),
        quantity=quantity,
        unit=unit or DEFAULT_INGREDIENT_UNIT,
        expiration_date=expiration_date,
    )


def build_recipe(
    name: str,
    description: Optional[str],
    ingredients: Union[str, Iterable[str]],
    steps: Union[str, Iterable[str]],
    prep_time: int = 0,
    cook_time: int = 0,
    recipe_id: Optional[str] = None,
) -> Recipe:
    """
    Validate the create/edit recipe form.

    Blank ingredient and step lines are dropped before the checks.

    Raises:
        FormValidationError: Blank name, no ingredients, no steps or a
            negative time
    """
    if not name or not name.strip():
        raise FormValidationError("Recipe name is required")

    ingredient_lines = clean_lines(ingredients)
    step_lines = clean_lines(steps)
    if not ingredient_lines:
        raise FormValidationError("Add at least one ingredient")
    if not step_lines:
        raise FormValidationError("Add at least one preparation step")
    if (prep_time or 0) < 0 or (cook_time or 0) < 0:
        raise FormValidationError("Times cannot be negative")

    return Recipe(
        id=recipe_id,
        name=name.strip(),
        description=(description or "").strip(),
        ingredients=ingredient_lines,
        steps=step_lines,
        prep_time=prep_time or 0,
        cook_time=cook_time or 0,
    )


def build_shopping_item(
    name: str,
    quantity: float = DEFAULT_SHOPPING_QUANTITY,
    unit: str = DEFAULT_SHOPPING_UNIT,
) -> ShoppingItem:
    """
    Validate the add-item form. New items start unchecked.

    Raises:
        FormValidationError: Blank name or non-positive quantity
    """
    if not name or not name.strip():
        raise FormValidationError("Item name is required")
    if quantity is None or quantity <= 0:
        raise FormValidationError("Quantity must be greater than zero")

    return ShoppingItem(
        name=name.strip(),
        quantity=quantity,
        unit=unit or DEFAULT_SHOPPING_UNIT,
        checked=False,
    )


def toggled(item: ShoppingItem) -> ShoppingItem:
    """Copy of the item with ``checked`` inverted."""
    return item.model_copy(update={"checked": not item.checked})


def filter_by_name(items: Iterable[NamedT], query: str) -> list[NamedT]:
    """Case-insensitive substring match on ``name``; blank query keeps all."""
    needle = (query or "").strip().casefold()
    if not needle:
        return list(items)
    return [item for item in items if needle in item.name.casefold()]


def split_by_checked(
    items: Iterable[ShoppingItem],
) -> tuple[list[ShoppingItem], list[ShoppingItem]]:
    """Returns (to_buy, checked), preserving order."""
    to_buy, checked = [], []
    for item in items:
        (checked if item.checked else to_buy).append(item)
    return to_buy, checked


def checked_progress(items: list[ShoppingItem]) -> float:
    """Fraction of items checked off; 0 for an empty list."""
    if not items:
        return 0.0
    return sum(1 for i in items if i.checked) / len(items)


def recipe_times_caption(recipe: Recipe) -> str:
    return f"Prep: {recipe.prep_time} min | Cook: {recipe.cook_time} min"


def recipe_ingredient_preview(
    recipe: Recipe,
    limit: int = RECIPE_PREVIEW_INGREDIENTS,
) -> list[str]:
    """First ``limit`` ingredients, then "+N more" when some are hidden."""
    preview = list(recipe.ingredients[:limit])
    hidden = len(recipe.ingredients) - limit
    if hidden > 0:
        preview.append(f"+{hidden} more")
    return preview
