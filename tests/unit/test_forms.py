# tests/unit/test_forms.py
from datetime import date

import pytest

from models import Recipe, ShoppingItem
from services import forms
from services.exceptions import FormValidationError


def test_build_ingredient_normalizes_values():
    ing = forms.build_ingredient("  Milk ", 2, "l", date(2024, 6, 18))
    assert ing.name == "Milk"
    assert ing.expiration_date == "2024-06-18"
    assert ing.id is None


@pytest.mark.parametrize("name,quantity,expires", [
    ("  ", 1, "2024-06-18"),
    ("Milk", 0, "2024-06-18"),
    ("Milk", -1, "2024-06-18"),
    ("Milk", 1, None),
])
def test_build_ingredient_rejects_invalid_input(name, quantity, expires):
    with pytest.raises(FormValidationError):
        forms.build_ingredient(name, quantity, "g", expires)


def test_build_recipe_drops_blank_lines():
    recipe = forms.build_recipe(
        "Pancakes", None, "flour\n\n  milk  \n", ["mix", "  ", "fry"], 5, 10
    )
    assert recipe.ingredients == ["flour", "milk"]
    assert recipe.steps == ["mix", "fry"]
    assert recipe.description == ""


@pytest.mark.parametrize("kwargs", [
    dict(name="", ingredients="flour", steps="mix"),
    dict(name="Bread", ingredients="\n \n", steps="mix"),
    dict(name="Bread", ingredients="flour", steps=""),
    dict(name="Bread", ingredients="flour", steps="mix", prep_time=-1),
])
def test_build_recipe_rejects_invalid_input(kwargs):
    with pytest.raises(FormValidationError):
        forms.build_recipe(description="", **kwargs)


def test_build_shopping_item_defaults():
    item = forms.build_shopping_item("Eggs")
    assert item.quantity == 1
    assert item.unit == "pcs"
    assert item.checked is False
    with pytest.raises(FormValidationError):
        forms.build_shopping_item("Eggs", 0)


def test_toggled_returns_a_copy():
    item = ShoppingItem(id="1", name="Eggs")
    flipped = forms.toggled(item)
    assert flipped.checked is True
    assert item.checked is False


def test_filter_by_name_is_case_insensitive():
    items = [ShoppingItem(name="Green Apples"), ShoppingItem(name="Bread")]
    assert [i.name for i in forms.filter_by_name(items, "apple")] == ["Green Apples"]
    assert len(forms.filter_by_name(items, "  ")) == 2


def test_split_and_progress():
    items = [
        ShoppingItem(id="1", name="a", checked=True),
        ShoppingItem(id="2", name="b"),
        ShoppingItem(id="3", name="c"),
        ShoppingItem(id="4", name="d", checked=True),
    ]
    to_buy, checked = forms.split_by_checked(items)
    assert [i.id for i in to_buy] == ["2", "3"]
    assert [i.id for i in checked] == ["1", "4"]
    assert forms.checked_progress(items) == 0.5
    assert forms.checked_progress([]) == 0.0


def test_recipe_card_helpers():
    recipe = Recipe(name="Stew", ingredients=["a", "b", "c", "d", "e"], prepTime=10, cookTime=45)
    assert forms.recipe_times_caption(recipe) == "Prep: 10 min | Cook: 45 min"
    assert forms.recipe_ingredient_preview(recipe) == ["a", "b", "c", "+2 more"]
    short = Recipe(name="Toast", ingredients=["bread"])
    assert forms.recipe_ingredient_preview(short) == ["bread"]
