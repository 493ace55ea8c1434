"""
Shopping View - UI for the household shopping list.

This view handles:
- Adding items
- Checking items off while shopping
- Deleting items and clearing everything already checked
"""

import streamlit as st

from controllers.shopping_controller import ShoppingController
from views.components.shopping_item import render_shopping_item, render_add_item_form
from views.components.shopping_stats import render_shopping_progress
from views.components.sidebar import render_navigation_sidebar


class ShoppingView:
    """View for shopping list UI."""

    def __init__(self):
        self.controller = ShoppingController()

    def render(self):
        """Main render method."""
        render_navigation_sidebar("shopping_list")
        self.controller.ensure_loaded()

        col_title, col_clear = st.columns([4, 1])
        with col_title:
            st.title("Shopping List")
            st.markdown("Manage your shopping list")
        with col_clear:
            if self.controller.get_checked():
                if st.button("Clear Checked Items", use_container_width=True):
                    self.controller.clear_checked()
                    st.rerun()

        error = self.controller.pop_error()
        if error:
            st.error(error)

        col_form, col_list = st.columns([1, 2])

        with col_form:
            render_add_item_form(
                on_add=self.controller.add_item,
                form_key=self.controller.get_form_key(),
            )

        with col_list:
            self._render_list()

    def _render_list(self):
        """Render progress, then the to-buy and checked sections."""
        items = self.controller.get_items()
        to_buy = self.controller.get_to_buy()
        checked = self.controller.get_checked()

        with st.container(border=True):
            st.markdown("#### Shopping List")
            st.caption(f"{len(to_buy)} items remaining")

            render_shopping_progress(
                remaining=len(to_buy),
                checked=len(checked),
                progress=self.controller.get_progress(),
            )

            if not items:
                st.info("Your shopping list is empty")
                return

            st.markdown("##### To Buy")
            if not to_buy:
                st.caption("All items have been checked off")
            for item in to_buy:
                render_shopping_item(
                    item,
                    on_toggle=self.controller.toggle_item,
                    on_delete=self.controller.delete_item,
                )

            if checked:
                st.markdown("##### Checked")
                for item in checked:
                    render_shopping_item(
                        item,
                        on_toggle=self.controller.toggle_item,
                        on_delete=self.controller.delete_item,
                    )
