"""
Meal Planning View - weekly grid of planned meals.

Delegates slot assignment and removal to the MealPlanningController.
"""

import streamlit as st

from controllers.meal_planning_controller import MealPlanningController
from views.components.dialogs import meal_dialog
from views.components.meal_grid import render_week_grid
from views.components.sidebar import render_navigation_sidebar


class MealPlanningView:
    """View for the meal planning page."""

    def __init__(self):
        self.controller = MealPlanningController()

    def render(self):
        """Main render method."""
        render_navigation_sidebar("meal_planning")
        self.controller.ensure_loaded()

        col_title, col_add = st.columns([4, 1])
        with col_title:
            st.title("Meal Planning")
            st.markdown("Plan your meals for the week")
        with col_add:
            add_clicked = st.button("＋ Add Meal", type="primary", use_container_width=True)

        if add_clicked:
            self.controller.reset_draft()
            self._open_dialog()

        error = self.controller.pop_error()
        if error:
            st.error(error)

        with st.container(border=True):
            st.markdown("### 📅 Weekly Meal Plan")
            st.caption("Your meal plan for the week")

            clicked_slot = render_week_grid(
                grid=self.controller.get_week_grid(),
                recipe_name=self.controller.get_recipe_name,
                on_delete=self.controller.delete_meal,
            )

        if clicked_slot:
            self._add_to_slot(*clicked_slot)

    def _add_to_slot(self, day: str, meal_type: str):
        """Empty slot clicked: open the dialog with that slot pre-selected."""
        self.controller.select_slot(day, meal_type)
        self._open_dialog()

    def _open_dialog(self):
        meal_dialog(
            draft=self.controller.get_draft(),
            recipes=self.controller.get_recipes(),
            on_submit=self.controller.add_meal,
        )
