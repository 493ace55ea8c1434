"""
Services layer - pure business logic, no Streamlit dependencies.
"""

from services.exceptions import PantryDashboardError, PantryAPIError, FormValidationError
from services.pantry_api import PantryAPI
from services.dashboard_service import DashboardService, DashboardCounts
from services.expiration_service import ExpirationStatus, ExpirationRow

__all__ = [
    "PantryDashboardError",
    "PantryAPIError",
    "FormValidationError",
    "PantryAPI",
    "DashboardService",
    "DashboardCounts",
    "ExpirationStatus",
    "ExpirationRow",
]
