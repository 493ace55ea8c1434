"""
Weekly meal plan grid component.
"""

from typing import Callable, Optional

import streamlit as st

from models import MealPlanEntry
from services.meal_plan_service import DAYS_OF_WEEK, MEAL_TYPES


def render_week_grid(
    grid: dict[str, dict[str, Optional[MealPlanEntry]]],
    recipe_name: Callable[[str], str],
    on_delete: Callable[[str], bool],
) -> Optional[tuple[str, str]]:
    """
    Render the 7-day plan: a header row of days, then one row per meal type.

    Args:
        grid: {meal_type: {day: entry or None}}
        recipe_name: Resolves a recipe id to its name
        on_delete: Callback removing an entry by id

    Returns:
        (day, meal_type) of the empty slot clicked this run, or None
    """
    clicked = None

    header = st.columns(len(DAYS_OF_WEEK))
    for column, day in zip(header, DAYS_OF_WEEK):
        with column:
            st.markdown(f"**{day}**")

    for meal_type, label in MEAL_TYPES.items():
        row = st.columns(len(DAYS_OF_WEEK))
        for column, day in zip(row, DAYS_OF_WEEK):
            with column:
                st.caption(label)
                entry = grid[meal_type][day]
                if entry:
                    _render_filled_slot(entry, recipe_name(entry.recipe_id), on_delete)
                else:
                    if st.button(
                        "＋ Add",
                        key=f"add_{day}_{meal_type}",
                        use_container_width=True,
                    ):
                        clicked = (day, meal_type)

    return clicked


def _render_filled_slot(
    entry: MealPlanEntry,
    name: str,
    on_delete: Callable[[str], bool],
):
    with st.container(border=True):
        st.caption(name)
        if st.button("🗑️", key=f"delete_meal_{entry.id}", help="Delete"):
            on_delete(entry.id)
            st.rerun()
