"""
Shopping list item components.
"""

from typing import Callable

import streamlit as st

from models import ShoppingItem
from services.forms import SHOPPING_UNITS, DEFAULT_SHOPPING_UNIT, DEFAULT_SHOPPING_QUANTITY


def _toggle(item_id: str, widget_key: str, on_toggle: Callable[[str], object]):
    # Drop the widget value on failure so the box shows the stored state again
    if on_toggle(item_id) is None:
        st.session_state.pop(widget_key, None)


def render_shopping_item(
    item: ShoppingItem,
    on_toggle: Callable[[str], object],
    on_delete: Callable[[str], bool],
):
    """
    Render a single shopping list item with checkbox and delete button.

    Args:
        item: Shopping list item
        on_toggle: Callback to invert the checked state; returns None on failure
        on_delete: Callback to delete the item
    """
    col_check, col_label, col_delete = st.columns([0.5, 6, 0.7])
    widget_key = f"item_{item.id}"

    with col_check:
        st.checkbox(
            "checked",
            value=item.checked,
            key=widget_key,
            label_visibility="collapsed",
            on_change=_toggle,
            args=(item.id, widget_key, on_toggle),
        )

    with col_label:
        label = f"{item.name} ({item.display_quantity})"
        if item.checked:
            st.markdown(f"~~{label}~~")
        else:
            st.markdown(f"**{item.name}** ({item.display_quantity})")

    with col_delete:
        if st.button("🗑️", key=f"delete_item_{item.id}", help="Delete"):
            on_delete(item.id)
            st.rerun()


def render_add_item_form(on_add: Callable[[str, float, str], bool], form_key: int = 0):
    """
    Render the add-item form.

    Args:
        on_add: Callback taking (name, quantity, unit); returns True when added
        form_key: Widget key suffix; changing it resets the inputs
    """
    units = list(SHOPPING_UNITS)

    with st.form(f"add_shopping_item_{form_key}", border=True):
        st.markdown("#### Add Item")
        st.caption("Add a new item to your shopping list")

        name = st.text_input("Item Name", placeholder="Enter item name")
        col_qty, col_unit = st.columns(2)
        with col_qty:
            quantity = st.number_input(
                "Quantity",
                min_value=1.0,
                value=float(DEFAULT_SHOPPING_QUANTITY),
                step=1.0,
            )
        with col_unit:
            unit = st.selectbox(
                "Unit",
                options=units,
                index=units.index(DEFAULT_SHOPPING_UNIT),
                format_func=lambda u: SHOPPING_UNITS[u],
            )

        if st.form_submit_button("Add to List", type="primary", use_container_width=True):
            if on_add(name, quantity, unit):
                st.rerun()
