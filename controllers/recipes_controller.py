"""
Recipes Controller - recipe collection page.

This controller handles:
- Loading recipes (and reloading on demand)
- Creating and editing recipes through the shared form rules
- Deleting recipes
- Name search over the loaded list
"""

import logging
from typing import Iterable, Optional, Union

from models import Recipe
from services import forms
from services.exceptions import FormValidationError, PantryAPIError
from controllers.base import PageController

logger = logging.getLogger(__name__)


class RecipesController(PageController):
    """Controller for the recipes page."""

    STATE_KEY = "recipes"

    def _default_state(self) -> dict:
        return {
            "items": [],
            "search": "",
        }

    def _load(self):
        self.page_state["items"] = self.api.list_recipes()

    # ==========================================
    # Session State Accessors
    # ==========================================

    def get_recipes(self) -> list[Recipe]:
        """Loaded recipes filtered by the current search."""
        return forms.filter_by_name(self.page_state["items"], self.get_search())

    def get_recipe(self, recipe_id: str) -> Optional[Recipe]:
        for recipe in self.page_state["items"]:
            if recipe.id == recipe_id:
                return recipe
        return None

    def get_search(self) -> str:
        return self.page_state["search"]

    def set_search(self, query: str):
        self.page_state["search"] = query or ""

    # ==========================================
    # Mutations
    # ==========================================

    def add_recipe(
        self,
        name: str,
        description: Optional[str],
        ingredients: Union[str, Iterable[str]],
        steps: Union[str, Iterable[str]],
        prep_time: int = 0,
        cook_time: int = 0,
    ) -> bool:
        """Create a recipe. Returns False if the form is invalid or the request fails."""
        try:
            recipe = forms.build_recipe(
                name, description, ingredients, steps, prep_time, cook_time
            )
        except FormValidationError as e:
            logger.debug(f"Ignoring recipe form: {e}")
            return False

        try:
            created = self.api.create_recipe(recipe)
        except PantryAPIError as e:
            self._fail("Could not create recipe", e)
            return False

        self.page_state["items"] = [*self.page_state["items"], created]
        logger.info(f"Added recipe {created.name!r} ({created.id})")
        return True

    def update_recipe(
        self,
        recipe_id: str,
        name: str,
        description: Optional[str],
        ingredients: Union[str, Iterable[str]],
        steps: Union[str, Iterable[str]],
        prep_time: int = 0,
        cook_time: int = 0,
    ) -> bool:
        """Save an edited recipe and replace it in the list with the server's copy."""
        try:
            recipe = forms.build_recipe(
                name, description, ingredients, steps, prep_time, cook_time,
                recipe_id=recipe_id,
            )
        except FormValidationError as e:
            logger.debug(f"Ignoring recipe edit: {e}")
            return False

        try:
            updated = self.api.update_recipe(recipe)
        except PantryAPIError as e:
            self._fail("Could not update recipe", e)
            return False

        self.page_state["items"] = [
            updated if r.id == updated.id else r for r in self.page_state["items"]
        ]
        return True

    def delete_recipe(self, recipe_id: str) -> bool:
        try:
            self.api.delete_recipe(recipe_id)
        except PantryAPIError as e:
            self._fail("Could not delete recipe", e)
            return False

        self.page_state["items"] = [
            r for r in self.page_state["items"] if r.id != recipe_id
        ]
        return True
