"""
Shopping Controller - manages the shopping list view and interactions.

This controller handles:
- Loading the shopping list
- Adding items
- Checking/unchecking items (persisted with PUT)
- Deleting single items and clearing all checked items
"""

import logging
from typing import Optional

from models import ShoppingItem
from services import forms
from services.exceptions import FormValidationError, PantryAPIError
from controllers.base import PageController

logger = logging.getLogger(__name__)


class ShoppingController(PageController):
    """Controller for shopping list management."""

    STATE_KEY = "shopping_list"

    def _default_state(self) -> dict:
        return {"items": [], "form_key": 0}

    def _load(self):
        self.page_state["items"] = self.api.list_shopping_items()

    # ==========================================
    # Session State Accessors
    # ==========================================

    def get_items(self) -> list[ShoppingItem]:
        return self.page_state["items"]

    def get_item(self, item_id: str) -> Optional[ShoppingItem]:
        for item in self.page_state["items"]:
            if item.id == item_id:
                return item
        return None

    def get_to_buy(self) -> list[ShoppingItem]:
        return forms.split_by_checked(self.get_items())[0]

    def get_checked(self) -> list[ShoppingItem]:
        return forms.split_by_checked(self.get_items())[1]

    def get_progress(self) -> float:
        """Fraction of items checked off."""
        return forms.checked_progress(self.get_items())

    def get_form_key(self) -> int:
        """Current add-form key; bumped after each add to reset the widgets."""
        return self.page_state["form_key"]

    # ==========================================
    # Item Operations
    # ==========================================

    def add_item(self, name: str, quantity: float, unit: str) -> bool:
        """Add an item to the list. Returns False if invalid or the request fails."""
        try:
            item = forms.build_shopping_item(name, quantity, unit)
        except FormValidationError as e:
            logger.debug(f"Ignoring shopping form: {e}")
            return False

        try:
            created = self.api.create_shopping_item(item)
        except PantryAPIError as e:
            self._fail("Could not add item", e)
            return False

        self.page_state["items"] = [*self.page_state["items"], created]
        self.page_state["form_key"] += 1
        return True

    def toggle_item(self, item_id: str) -> Optional[bool]:
        """Invert an item's checked status. Returns the new status, or None on failure."""
        item = self.get_item(item_id)
        if item is None:
            return None

        try:
            returned = self.api.update_shopping_item(forms.toggled(item))
        except PantryAPIError as e:
            self._fail("Could not update item", e)
            return None

        self.page_state["items"] = [
            returned if i.id == item_id else i for i in self.page_state["items"]
        ]
        return returned.checked

    def delete_item(self, item_id: str) -> bool:
        try:
            self.api.delete_shopping_item(item_id)
        except PantryAPIError as e:
            self._fail("Could not delete item", e)
            return False

        self.page_state["items"] = [
            i for i in self.page_state["items"] if i.id != item_id
        ]
        return True

    def clear_checked(self) -> int:
        """
        Delete all checked items.

        Items whose delete failed stay on the list and an error is recorded.

        Returns:
            Number of items removed
        """
        checked = self.get_checked()
        if not checked:
            return 0

        deleted = set(self.api.clear_checked(checked))
        self.page_state["items"] = [
            i for i in self.page_state["items"] if i.id not in deleted
        ]

        failed = len(checked) - len(deleted)
        if failed:
            message = f"Could not clear {failed} checked item(s)"
            logger.error(message)
            self.page_state["error"] = message
        return len(deleted)
