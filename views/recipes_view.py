"""
Recipes View - recipe cards with create, edit and delete.
"""

from functools import partial

import streamlit as st

from controllers.recipes_controller import RecipesController
from models import Recipe
from views.components.dialogs import new_recipe_dialog, edit_recipe_dialog
from views.components.recipe_card import render_recipe_card
from views.components.sidebar import render_navigation_sidebar

CARDS_PER_ROW = 3


class RecipesView:
    """View for the recipes page."""

    def __init__(self):
        self.controller = RecipesController()

    def render(self):
        """Main render method."""
        render_navigation_sidebar("recipes")
        self.controller.ensure_loaded()

        col_title, col_add = st.columns([4, 1])
        with col_title:
            st.title("Recipes")
            st.markdown("Manage your recipes")
        with col_add:
            add_clicked = st.button("＋ Add Recipe", type="primary", use_container_width=True)

        if add_clicked:
            new_recipe_dialog(self.controller.add_recipe)

        error = self.controller.pop_error()
        if error:
            st.error(error)

        col_search, col_refresh = st.columns([4, 1])
        with col_search:
            query = st.text_input(
                "Search",
                value=self.controller.get_search(),
                placeholder="Search recipes...",
                label_visibility="collapsed",
            )
            self.controller.set_search(query)
        with col_refresh:
            if st.button("Refresh", use_container_width=True):
                self.controller.reload()
                st.rerun()

        self._render_cards(self.controller.get_recipes())

    def _render_cards(self, recipes: list[Recipe]):
        """Render recipes in a grid of cards."""
        if not recipes:
            st.info("No recipes found.")
            return

        to_edit = None
        for start in range(0, len(recipes), CARDS_PER_ROW):
            columns = st.columns(CARDS_PER_ROW)
            for column, recipe in zip(columns, recipes[start:start + CARDS_PER_ROW]):
                with column:
                    if render_recipe_card(recipe, on_delete=self.controller.delete_recipe):
                        to_edit = recipe

        if to_edit:
            self._open_editor(to_edit)

    def _open_editor(self, recipe: Recipe):
        edit_recipe_dialog(recipe, partial(self.controller.update_recipe, recipe.id))
