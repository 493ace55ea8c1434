"""
Dashboard Controller - collection counts for the home page.
"""

from typing import Optional

from config.settings import get_settings
from services.dashboard_service import DashboardCounts, DashboardService
from controllers.base import PageController


class DashboardController(PageController):
    """Controller for the dashboard page."""

    STATE_KEY = "dashboard"

    def __init__(self, api=None, state=None):
        super().__init__(api=api, state=state)
        self.service = DashboardService(self.api)

    def _default_state(self) -> dict:
        return {"counts": None}

    def _load(self):
        days = get_settings().expiring_days
        self.page_state["counts"] = self.service.get_counts(days)

    def get_counts(self) -> Optional[DashboardCounts]:
        return self.page_state["counts"]

    def get_expiring_days(self) -> int:
        return get_settings().expiring_days
