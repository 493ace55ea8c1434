"""
Modal dialogs for creating and editing pantry records.

Each dialog closes itself (st.rerun) when its submit callback returns
True. A rejected submit leaves the dialog open with the values entered.
"""

from typing import Callable, Optional

import streamlit as st

from models import Recipe
from services.forms import INGREDIENT_UNITS, DEFAULT_INGREDIENT_UNIT
from services.meal_plan_service import DAYS_OF_WEEK, MEAL_TYPES


def _cancel_or_submit(submit_label: str, key: str) -> bool:
    """Footer buttons. Returns True when submit was clicked."""
    col_cancel, col_submit = st.columns(2)
    with col_cancel:
        if st.button("Cancel", key=f"{key}_cancel", use_container_width=True):
            st.rerun()
    with col_submit:
        return st.button(
            submit_label,
            key=f"{key}_submit",
            type="primary",
            use_container_width=True,
        )


# ==========================================
# Ingredients
# ==========================================

@st.dialog("Add New Ingredient")
def ingredient_dialog(on_submit: Callable[..., bool]):
    """
    Args:
        on_submit: Callback taking (name, quantity, unit, expiration_date)
    """
    st.caption("Enter the details of the new ingredient")
    units = list(INGREDIENT_UNITS)

    name = st.text_input("Name", placeholder="Ingredient name")
    col_qty, col_unit = st.columns(2)
    with col_qty:
        quantity = st.number_input("Quantity", min_value=0.0, value=0.0, step=1.0)
    with col_unit:
        unit = st.selectbox(
            "Unit",
            options=units,
            index=units.index(DEFAULT_INGREDIENT_UNIT),
            format_func=lambda u: INGREDIENT_UNITS[u],
        )
    expiration_date = st.date_input("Expiration Date", value=None)

    if _cancel_or_submit("Add Ingredient", "ingredient_dialog"):
        if on_submit(name, quantity, unit, expiration_date):
            st.rerun()


# ==========================================
# Recipes
# ==========================================

def _recipe_form(recipe: Optional[Recipe], on_submit: Callable[..., bool], submit_label: str, key: str):
    name = st.text_input("Recipe Name", value=recipe.name if recipe else "", key=f"{key}_name")
    description = st.text_input(
        "Description",
        value=(recipe.description or "") if recipe else "",
        key=f"{key}_description",
    )

    col_prep, col_cook = st.columns(2)
    with col_prep:
        prep_time = st.number_input(
            "Prep Time (minutes)",
            min_value=0,
            value=recipe.prep_time if recipe else 0,
            key=f"{key}_prep",
        )
    with col_cook:
        cook_time = st.number_input(
            "Cook Time (minutes)",
            min_value=0,
            value=recipe.cook_time if recipe else 0,
            key=f"{key}_cook",
        )

    tab_ingredients, tab_steps = st.tabs(["Ingredients", "Preparation Steps"])
    with tab_ingredients:
        ingredients = st.text_area(
            "Ingredients (one per line)",
            value="\n".join(recipe.ingredients) if recipe else "",
            height=180,
            key=f"{key}_ingredients",
        )
    with tab_steps:
        steps = st.text_area(
            "Steps (one per line, in order)",
            value="\n".join(recipe.steps) if recipe else "",
            height=180,
            key=f"{key}_steps",
        )

    if _cancel_or_submit(submit_label, key):
        if on_submit(name, description, ingredients, steps, int(prep_time), int(cook_time)):
            st.rerun()


@st.dialog("Add New Recipe", width="large")
def new_recipe_dialog(on_submit: Callable[..., bool]):
    """
    Args:
        on_submit: Callback taking (name, description, ingredients, steps,
            prep_time, cook_time)
    """
    st.caption("Enter the details of your new recipe")
    _recipe_form(None, on_submit, "Save Recipe", "new_recipe")


@st.dialog("Edit Recipe", width="large")
def edit_recipe_dialog(recipe: Recipe, on_submit: Callable[..., bool]):
    """
    Args:
        recipe: Recipe being edited (pre-fills the form)
        on_submit: Same signature as for new_recipe_dialog
    """
    _recipe_form(recipe, on_submit, "Update Recipe", f"edit_recipe_{recipe.id}")


# ==========================================
# Meal Planning
# ==========================================

@st.dialog("Add Meal to Plan")
def meal_dialog(
    draft: dict,
    recipes: list[Recipe],
    on_submit: Callable[[str, str, str], bool],
):
    """
    Args:
        draft: Pre-selected {"day", "meal_type"}
        recipes: Recipes offered in the picker
        on_submit: Callback taking (day, meal_type, recipe_id)
    """
    st.caption("Select a day, meal type, and recipe")
    meal_types = list(MEAL_TYPES)
    recipe_names = {r.id: r.name for r in recipes}

    day = st.selectbox(
        "Day",
        options=DAYS_OF_WEEK,
        index=DAYS_OF_WEEK.index(draft["day"]) if draft["day"] in DAYS_OF_WEEK else 0,
    )
    meal_type = st.selectbox(
        "Meal Type",
        options=meal_types,
        index=meal_types.index(draft["meal_type"]) if draft["meal_type"] in meal_types else 0,
        format_func=lambda m: MEAL_TYPES[m],
    )
    recipe_id = st.selectbox(
        "Recipe",
        options=[""] + list(recipe_names),
        format_func=lambda rid: "Select recipe" if rid == "" else recipe_names[rid],
    )

    if not recipes:
        st.caption("No recipes yet. Add some on the Recipes page.")

    if _cancel_or_submit("Add to Plan", "meal_dialog"):
        if on_submit(day, meal_type, recipe_id):
            st.rerun()
