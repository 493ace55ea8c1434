"""
Expiration Controller - expiration tracking page.

Read-only: loads ingredients sorted by expiration date and exposes the
table rows and per-status counts.
"""

from datetime import date
from typing import Optional

from models import Ingredient
from services import expiration_service
from services.expiration_service import ExpirationRow, ExpirationStatus
from controllers.base import PageController


class ExpirationController(PageController):
    """Controller for the expiration page."""

    STATE_KEY = "expiration"

    def _default_state(self) -> dict:
        return {"items": []}

    def _load(self):
        ingredients = self.api.list_ingredients()
        self.page_state["items"] = expiration_service.sort_by_expiration(ingredients)

    def get_ingredients(self) -> list[Ingredient]:
        return self.page_state["items"]

    def get_rows(self, today: Optional[date] = None) -> list[ExpirationRow]:
        return expiration_service.build_rows(self.page_state["items"], today)

    def get_status_counts(self, today: Optional[date] = None) -> dict[ExpirationStatus, int]:
        return expiration_service.count_by_status(self.page_state["items"], today)
