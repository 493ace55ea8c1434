"""
Ingredients Controller - pantry inventory page.

This controller handles:
- Loading the ingredient list
- Adding ingredients (validated client-side first)
- Deleting ingredients
- Name search over the loaded list
"""

import logging
from datetime import date
from typing import Optional, Union

from models import Ingredient
from services import forms
from services.exceptions import FormValidationError, PantryAPIError
from controllers.base import PageController

logger = logging.getLogger(__name__)


class IngredientsController(PageController):
    """Controller for the ingredients page."""

    STATE_KEY = "ingredients"

    def _default_state(self) -> dict:
        return {
            "items": [],
            "search": "",
        }

    def _load(self):
        self.page_state["items"] = self.api.list_ingredients()

    # ==========================================
    # Session State Accessors
    # ==========================================

    def get_ingredients(self) -> list[Ingredient]:
        """Loaded ingredients filtered by the current search."""
        return forms.filter_by_name(self.page_state["items"], self.get_search())

    def get_total(self) -> int:
        return len(self.page_state["items"])

    def get_search(self) -> str:
        return self.page_state["search"]

    def set_search(self, query: str):
        self.page_state["search"] = query or ""

    def get_empty_message(self) -> Optional[str]:
        """Placeholder for an empty table; None after a failed load."""
        if self.get_load_error():
            return None
        if self.get_total():
            return "No ingredients match your search."
        return "Your pantry is empty. Add an ingredient to get started."

    # ==========================================
    # Mutations
    # ==========================================

    def add_ingredient(
        self,
        name: str,
        quantity: float,
        unit: str,
        expiration_date: Optional[Union[date, str]],
    ) -> bool:
        """
        Create an ingredient and append the server's copy to the list.

        Returns False when the form is invalid or the request fails.
        """
        try:
            ingredient = forms.build_ingredient(name, quantity, unit, expiration_date)
        except FormValidationError as e:
            logger.debug(f"Ignoring ingredient form: {e}")
            return False

        try:
            created = self.api.create_ingredient(ingredient)
        except PantryAPIError as e:
            self._fail("Could not create ingredient", e)
            return False

        self.page_state["items"] = [*self.page_state["items"], created]
        logger.info(f"Added ingredient {created.name!r} ({created.id})")
        return True

    def delete_ingredient(self, ingredient_id: str) -> bool:
        """Delete an ingredient; the local list changes only on success."""
        try:
            self.api.delete_ingredient(ingredient_id)
        except PantryAPIError as e:
            self._fail("Could not delete ingredient", e)
            return False

        self.page_state["items"] = [
            i for i in self.page_state["items"] if i.id != ingredient_id
        ]
        return True
