"""
Pantry Entity Models

Pydantic models for the resources exposed by the pantry REST API.

The API speaks camelCase JSON (``expirationDate``, ``prepTime``,
``recipeId``); the models expose snake_case attributes and keep the
camelCase names as aliases so that responses validate directly and
request payloads serialize back to the wire format.

Identifiers are always strings on the Python side. The backend returns
numeric ids, which are normalized on the way in.

Resource overview:
    Ingredient    - pantry item with an expiration date
    Recipe        - dish with ingredient lines and preparation steps
    MealPlan      - wire form of a weekly slot ("Monday_breakfast")
    MealPlanEntry - MealPlan with the slot key split into day / meal type
    ShoppingItem  - to-buy entry with a checked flag
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _id_to_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def format_quantity(quantity: float) -> str:
    """Render 2.0 as '2' and 1.5 as '1.5'."""
    if float(quantity).is_integer():
        return str(int(quantity))
    return f"{quantity:g}"


class ApiModel(BaseModel):
    """Base for wire models: accepts aliases and field names, ignores extras."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _normalize_id(cls, value: Any) -> Optional[str]:
        return _id_to_str(value)

    def to_payload(self, include_id: bool = False) -> dict:
        """Serialize to the camelCase JSON body expected by the API."""
        exclude = None if include_id else {"id"}
        return self.model_dump(mode="json", by_alias=True, exclude=exclude)


class Ingredient(ApiModel):
    """A pantry item."""
    name: str
    quantity: float = 0
    unit: str = "g"
    expiration_date: str = Field("", alias="expirationDate")

    @field_validator("expiration_date", mode="before")
    @classmethod
    def _none_to_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def display_quantity(self) -> str:
        return f"{format_quantity(self.quantity)} {self.unit}"


class Recipe(ApiModel):
    """
    A recipe.

    Ingredients and steps are free-text lines, in display order.
    Times are in minutes.
    """
    name: str
    description: Optional[str] = ""
    ingredients: list[str] = Field(default_factory=list)
    steps: list[str] = Field(default_factory=list)
    prep_time: int = Field(0, alias="prepTime")
    cook_time: int = Field(0, alias="cookTime")

    @field_validator("ingredients", "steps", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("prep_time", "cook_time", mode="before")
    @classmethod
    def _none_to_zero(cls, value: Any) -> Any:
        return 0 if value is None else value


class MealPlan(ApiModel):
    """
    Meal plan entry as stored by the API.

    ``date`` is not a calendar date: it holds the slot key
    ``"<Day>_<mealType>"``, e.g. ``"Monday_breakfast"``.
    """
    date: Optional[str] = None
    recipe_id: str = Field("", alias="recipeId")

    @field_validator("recipe_id", mode="before")
    @classmethod
    def _normalize_recipe_id(cls, value: Any) -> str:
        return _id_to_str(value) or ""


class MealPlanEntry(BaseModel):
    """Meal plan entry with its slot key split into display fields."""
    id: str
    day: str
    meal_type: str
    recipe_id: str


class ShoppingItem(ApiModel):
    """An entry on the shopping list."""
    name: str
    quantity: float = 1
    unit: str = "pcs"
    checked: bool = False

    @property
    def display_quantity(self) -> str:
        return f"{format_quantity(self.quantity)} {self.unit}"
