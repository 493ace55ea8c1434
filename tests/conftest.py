# tests/conftest.py
import itertools

import pytest

from models import Ingredient, MealPlan, Recipe, ShoppingItem
from services.exceptions import PantryAPIError


class FakePantryAPI:
    """In-memory stand-in for PantryAPI used by the controller tests."""

    def __init__(self):
        self.ingredients: list[Ingredient] = []
        self.recipes: list[Recipe] = []
        self.meal_plans: list[MealPlan] = []
        self.shopping: list[ShoppingItem] = []
        self.expiring: list[Ingredient] = []
        self.calls: list[tuple] = []
        self.fail_on: set[str] = set()
        self.fail_on_clear: set[str] = set()
        self._ids = itertools.count(100)

    def _record(self, name, *args):
        self.calls.append((name, *args))
        if name in self.fail_on:
            raise PantryAPIError(f"{name} failed", status_code=500)

    def _next_id(self) -> str:
        return str(next(self._ids))

    def list_ingredients(self):
        self._record("list_ingredients")
        return list(self.ingredients)

    def create_ingredient(self, ingredient):
        self._record("create_ingredient", ingredient)
        return ingredient.model_copy(update={"id": self._next_id()})

    def delete_ingredient(self, ingredient_id):
        self._record("delete_ingredient", ingredient_id)

    def list_expiring(self, days):
        self._record("list_expiring", days)
        return list(self.expiring)

    def list_recipes(self):
        self._record("list_recipes")
        return list(self.recipes)

    def create_recipe(self, recipe):
        self._record("create_recipe", recipe)
        return recipe.model_copy(update={"id": self._next_id()})

    def update_recipe(self, recipe):
        self._record("update_recipe", recipe)
        return recipe

    def delete_recipe(self, recipe_id):
        self._record("delete_recipe", recipe_id)

    def list_meal_plans(self):
        self._record("list_meal_plans")
        return list(self.meal_plans)

    def create_meal_plan(self, payload):
        self._record("create_meal_plan", payload)
        return MealPlan(id=self._next_id(), date=payload["date"], recipeId=payload["recipeId"])

    def update_meal_plan(self, meal_plan_id, payload):
        self._record("update_meal_plan", meal_plan_id, payload)
        return MealPlan(id=meal_plan_id, date=payload["date"], recipeId=payload["recipeId"])

    def delete_meal_plan(self, meal_plan_id):
        self._record("delete_meal_plan", meal_plan_id)

    def list_shopping_items(self):
        self._record("list_shopping_items")
        return list(self.shopping)

    def create_shopping_item(self, item):
        self._record("create_shopping_item", item)
        return item.model_copy(update={"id": self._next_id()})

    def update_shopping_item(self, item):
        self._record("update_shopping_item", item)
        return item

    def delete_shopping_item(self, item_id):
        self._record("delete_shopping_item", item_id)

    def clear_checked(self, items):
        self.calls.append(("clear_checked", [i.id for i in items]))
        return [i.id for i in items if i.checked and i.id not in self.fail_on_clear]


@pytest.fixture
def api():
    return FakePantryAPI()


@pytest.fixture
def state():
    """Plain dict standing in for st.session_state."""
    return {}
