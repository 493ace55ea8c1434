"""
Recipe card component.
"""

from typing import Callable

import streamlit as st

from models import Recipe
from services.forms import recipe_ingredient_preview, recipe_times_caption


def render_recipe_card(
    recipe: Recipe,
    on_delete: Callable[[str], bool],
) -> bool:
    """
    Render a recipe as a bordered card.

    Shows the times, the first few ingredients and, in an expander, the
    full ingredient list and steps.

    Args:
        recipe: Recipe to display
        on_delete: Callback deleting the recipe by id

    Returns:
        True if the Edit button was clicked this run
    """
    with st.container(border=True):
        st.markdown(f"#### 📖 {recipe.name}")
        st.caption(recipe_times_caption(recipe))

        if recipe.description:
            st.write(recipe.description)

        st.markdown("**Ingredients:**")
        st.markdown("\n".join(f"- {line}" for line in recipe_ingredient_preview(recipe)))

        with st.expander("Full recipe"):
            st.markdown("**Ingredients**")
            st.markdown("\n".join(f"- {line}" for line in recipe.ingredients))
            st.markdown("**Preparation Steps**")
            st.markdown("\n".join(f"{i}. {step}" for i, step in enumerate(recipe.steps, 1)))

        col_edit, col_delete = st.columns(2)
        with col_edit:
            edit_clicked = st.button("✏️ Edit", key=f"edit_{recipe.id}", use_container_width=True)
        with col_delete:
            if st.button("🗑️ Delete", key=f"delete_recipe_{recipe.id}", use_container_width=True):
                on_delete(recipe.id)
                st.rerun()

    return edit_clicked
