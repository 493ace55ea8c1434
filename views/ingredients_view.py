"""
Ingredients View - pantry inventory table with add and delete.
"""

import streamlit as st

from controllers.ingredients_controller import IngredientsController
from views.components.dialogs import ingredient_dialog
from views.components.ingredient_row import render_ingredient_table_header, render_ingredient_row
from views.components.sidebar import render_navigation_sidebar


class IngredientsView:
    """View for the ingredients page."""

    def __init__(self):
        self.controller = IngredientsController()

    def render(self):
        """Main render method."""
        render_navigation_sidebar("ingredients")
        self.controller.ensure_loaded()

        col_title, col_add = st.columns([4, 1])
        with col_title:
            st.title("Ingredients")
            st.markdown("Manage your ingredients inventory")
        with col_add:
            add_clicked = st.button("＋ Add Ingredient", type="primary", use_container_width=True)

        if add_clicked:
            ingredient_dialog(self.controller.add_ingredient)

        error = self.controller.pop_error()
        if error:
            st.error(error)

        self._render_inventory()

    def _render_inventory(self):
        """Render the searchable inventory table."""
        with st.container(border=True):
            st.markdown("### Pantry Inventory")
            st.caption("View and manage all your ingredients")

            col_search, col_refresh = st.columns([4, 1])
            with col_search:
                query = st.text_input(
                    "Search",
                    value=self.controller.get_search(),
                    placeholder="Search ingredients...",
                    label_visibility="collapsed",
                )
                self.controller.set_search(query)
            with col_refresh:
                if st.button("Refresh", use_container_width=True):
                    self.controller.reload()
                    st.rerun()

            ingredients = self.controller.get_ingredients()
            if not ingredients:
                message = self.controller.get_empty_message()
                if message:
                    st.info(message)
                return

            render_ingredient_table_header()
            for ingredient in ingredients:
                render_ingredient_row(ingredient, on_delete=self.controller.delete_ingredient)
