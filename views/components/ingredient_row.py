"""
Ingredient table components.
"""

from typing import Callable

import streamlit as st

from models import Ingredient, format_quantity

_COLUMN_WIDTHS = [3, 1.5, 1.5, 2, 0.7]


def render_ingredient_table_header():
    """Render the table header row."""
    col_name, col_qty, col_unit, col_exp, col_actions = st.columns(_COLUMN_WIDTHS)

    with col_name:
        st.caption("Name")
    with col_qty:
        st.caption("Quantity")
    with col_unit:
        st.caption("Unit")
    with col_exp:
        st.caption("Expiration Date")
    with col_actions:
        st.caption("Actions")


def render_ingredient_row(
    ingredient: Ingredient,
    on_delete: Callable[[str], bool],
):
    """
    Render one ingredient with a delete button.

    Args:
        ingredient: The ingredient to show
        on_delete: Callback to delete by id
    """
    col_name, col_qty, col_unit, col_exp, col_actions = st.columns(_COLUMN_WIDTHS)

    with col_name:
        st.markdown(f"**{ingredient.name}**")
    with col_qty:
        st.write(format_quantity(ingredient.quantity))
    with col_unit:
        st.write(ingredient.unit)
    with col_exp:
        st.write(ingredient.expiration_date or "--")
    with col_actions:
        if st.button("🗑️", key=f"delete_ingredient_{ingredient.id}", help="Delete"):
            on_delete(ingredient.id)
            st.rerun()
