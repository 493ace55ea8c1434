from __future__ import annotations

from typing import Optional


class PantryDashboardError(RuntimeError):
    """Base class for service-layer errors."""


class PantryAPIError(PantryDashboardError):
    """A request to the pantry REST API failed (HTTP status or transport)."""

    def __init__(
        self,
        message: str,
        method: str = "",
        path: str = "",
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.method = method
        self.path = path
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.message} (HTTP {self.status_code})"
        return self.message


class FormValidationError(PantryDashboardError, ValueError):
    """User input rejected before any request is sent."""
