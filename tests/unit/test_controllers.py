# tests/unit/test_controllers.py
from models import Ingredient, MealPlan, Recipe, ShoppingItem
from controllers import (
    DashboardController,
    ExpirationController,
    IngredientsController,
    MealPlanningController,
    RecipesController,
    ShoppingController,
)
from controllers.base import ACTIVE_PAGE_KEY
from config.settings import get_settings
from services.expiration_service import ExpirationStatus


# ------------------------------------------
# Loading
# ------------------------------------------

def test_page_loads_once_until_navigation(api, state):
    api.ingredients = [Ingredient(id=1, name="Milk", expirationDate="2024-06-18")]
    controller = IngredientsController(api=api, state=state)

    controller.ensure_loaded()
    controller.ensure_loaded()
    assert api.calls.count(("list_ingredients",)) == 1
    assert state[ACTIVE_PAGE_KEY] == "ingredients"

    # Visiting another page and coming back re-fetches
    RecipesController(api=api, state=state).ensure_loaded()
    controller.ensure_loaded()
    assert api.calls.count(("list_ingredients",)) == 2


def test_load_failure_is_recorded(api, state):
    api.fail_on.add("list_recipes")
    controller = RecipesController(api=api, state=state)
    assert controller.reload() is False
    assert "list_recipes failed" in controller.get_load_error()
    assert controller.pop_error().startswith("Could not load recipes")
    assert controller.pop_error() is None


# ------------------------------------------
# Ingredients
# ------------------------------------------

def test_add_ingredient_appends_created_item(api, state):
    controller = IngredientsController(api=api, state=state)
    assert controller.add_ingredient("Eggs", 6, "pcs", "2024-06-20") is True
    (added,) = controller.get_ingredients()
    assert added.id == "100"
    assert added.name == "Eggs"


def test_invalid_ingredient_sends_nothing(api, state):
    controller = IngredientsController(api=api, state=state)
    assert controller.add_ingredient("", 6, "pcs", "2024-06-20") is False
    assert api.calls == []


def test_failed_delete_keeps_ingredient(api, state):
    api.ingredients = [Ingredient(id=1, name="Milk")]
    controller = IngredientsController(api=api, state=state)
    controller.reload()

    api.fail_on.add("delete_ingredient")
    assert controller.delete_ingredient("1") is False
    assert controller.get_total() == 1
    assert controller.pop_error() is not None

    api.fail_on.clear()
    assert controller.delete_ingredient("1") is True
    assert controller.get_total() == 0


def test_empty_message_depends_on_load_result(api, state):
    controller = IngredientsController(api=api, state=state)
    controller.reload()
    assert controller.get_empty_message().startswith("Your pantry is empty")

    api.ingredients = [Ingredient(id=1, name="Milk")]
    controller.reload()
    controller.set_search("rice")
    assert controller.get_empty_message() == "No ingredients match your search."

    api.fail_on.add("list_ingredients")
    controller.reload()
    assert controller.get_empty_message() is None


def test_ingredient_search(api, state):
    api.ingredients = [Ingredient(id=1, name="Milk"), Ingredient(id=2, name="Oat milk"), Ingredient(id=3, name="Rice")]
    controller = IngredientsController(api=api, state=state)
    controller.reload()
    controller.set_search("MILK")
    assert [i.id for i in controller.get_ingredients()] == ["1", "2"]
    assert controller.get_total() == 3


# ------------------------------------------
# Recipes
# ------------------------------------------

def test_update_recipe_replaces_item(api, state):
    api.recipes = [Recipe(id=1, name="Soup", ingredients=["water"], steps=["boil"])]
    controller = RecipesController(api=api, state=state)
    controller.reload()

    ok = controller.update_recipe("1", "Tomato Soup", "", "water\ntomato", "boil", 5, 20)
    assert ok is True
    recipe = controller.get_recipe("1")
    assert recipe.name == "Tomato Soup"
    assert recipe.ingredients == ["water", "tomato"]
    assert len(controller.get_recipes()) == 1


def test_add_and_delete_recipe(api, state):
    controller = RecipesController(api=api, state=state)
    assert controller.add_recipe("Toast", "", "bread", "toast it") is True
    recipe_id = controller.get_recipes()[0].id
    assert controller.delete_recipe(recipe_id) is True
    assert controller.get_recipes() == []


# ------------------------------------------
# Shopping list
# ------------------------------------------

def test_toggle_item_uses_returned_copy(api, state):
    api.shopping = [ShoppingItem(id=1, name="Eggs")]
    controller = ShoppingController(api=api, state=state)
    controller.reload()

    assert controller.toggle_item("1") is True
    assert controller.get_item("1").checked is True
    assert [i.id for i in controller.get_checked()] == ["1"]
    assert controller.get_progress() == 1.0


def test_failed_toggle_leaves_item(api, state):
    api.shopping = [ShoppingItem(id=1, name="Eggs")]
    api.fail_on.add("update_shopping_item")
    controller = ShoppingController(api=api, state=state)
    controller.reload()

    assert controller.toggle_item("1") is None
    assert controller.get_item("1").checked is False


def test_add_item_bumps_form_key(api, state):
    controller = ShoppingController(api=api, state=state)
    assert controller.add_item("Bread", 1, "pcs") is True
    assert controller.get_form_key() == 1
    assert controller.add_item(" ", 1, "pcs") is False
    assert controller.get_form_key() == 1


def test_clear_checked_keeps_failed_items(api, state):
    api.shopping = [
        ShoppingItem(id=1, name="a", checked=True),
        ShoppingItem(id=2, name="b"),
        ShoppingItem(id=3, name="c", checked=True),
    ]
    api.fail_on_clear = {"3"}
    controller = ShoppingController(api=api, state=state)
    controller.reload()

    assert controller.clear_checked() == 1
    assert [i.id for i in controller.get_items()] == ["2", "3"]
    assert controller.pop_error() == "Could not clear 1 checked item(s)"


# ------------------------------------------
# Meal planning
# ------------------------------------------

def test_add_meal_posts_for_empty_slot(api, state):
    api.recipes = [Recipe(id=4, name="Omelette")]
    controller = MealPlanningController(api=api, state=state)
    controller.reload()

    assert controller.add_meal("Monday", "breakfast", "4") is True
    assert ("create_meal_plan", {"date": "Monday_breakfast", "recipeId": 4}) in api.calls
    entry = controller.get_week_grid()["breakfast"]["Monday"]
    assert controller.get_recipe_name(entry.recipe_id) == "Omelette"


def test_add_meal_puts_for_occupied_slot(api, state):
    api.meal_plans = [MealPlan(id=7, date="Monday_dinner", recipeId=1)]
    controller = MealPlanningController(api=api, state=state)
    controller.reload()

    assert controller.add_meal("Monday", "dinner", "2") is True
    assert ("update_meal_plan", "7", {"date": "Monday_dinner", "recipeId": 2}) in api.calls
    assert len(controller.get_entries()) == 1
    assert controller.get_entries()[0].recipe_id == "2"


def test_blank_recipe_selection_is_ignored(api, state):
    controller = MealPlanningController(api=api, state=state)
    assert controller.add_meal("Monday", "lunch", "") is False
    assert api.calls == []


def test_select_slot_prefills_draft(api, state):
    controller = MealPlanningController(api=api, state=state)
    controller.select_slot("Friday", "dinner")
    assert controller.get_draft() == {"day": "Friday", "meal_type": "dinner"}
    controller.reset_draft()
    assert controller.get_draft()["day"] == "Monday"


def test_delete_meal(api, state):
    api.meal_plans = [MealPlan(id=7, date="Monday_dinner", recipeId=1)]
    controller = MealPlanningController(api=api, state=state)
    controller.reload()
    assert controller.delete_meal("7") is True
    assert controller.get_entries() == []


# ------------------------------------------
# Expiration and dashboard
# ------------------------------------------

def test_expiration_rows_and_counts(api, state):
    api.ingredients = [
        Ingredient(id=1, name="Rice", expirationDate="2024-12-01"),
        Ingredient(id=2, name="Milk", expirationDate="2024-06-09"),
    ]
    controller = ExpirationController(api=api, state=state)
    controller.reload()

    rows = controller.get_rows(today="2024-06-10")
    assert [r.name for r in rows] == ["Milk", "Rice"]
    counts = controller.get_status_counts(today="2024-06-10")
    assert counts[ExpirationStatus.EXPIRED] == 1
    assert counts[ExpirationStatus.GOOD] == 1


def test_dashboard_counts(api, state):
    api.ingredients = [Ingredient(id=1, name="Milk"), Ingredient(id=2, name="Rice")]
    api.recipes = [Recipe(id=1, name="Soup")]
    api.expiring = [Ingredient(id=1, name="Milk")]
    api.meal_plans = [
        MealPlan(id=1, date="Monday_lunch", recipeId=1),
        MealPlan(id=2, date="2024-06-10", recipeId=1),
    ]
    controller = DashboardController(api=api, state=state)
    assert controller.reload() is True

    counts = controller.get_counts()
    assert counts.as_series() == {
        "Ingredients": 2,
        "Recipes": 1,
        "Expiring": 1,
        "Shopping": 0,
        "Meal Plans": 1,
    }
    assert ("list_expiring", get_settings().expiring_days) in api.calls


def test_dashboard_failure_leaves_no_counts(api, state):
    api.fail_on.add("list_meal_plans")
    controller = DashboardController(api=api, state=state)
    assert controller.reload() is False
    assert controller.get_counts() is None
    assert controller.get_load_error() is not None
