"""
Base controller - per-page session state and load-on-mount handling.

Every page keeps its own slice of ``st.session_state`` under its
STATE_KEY. Pages do not share data: a page re-fetches its collections
each time the user navigates to it, and afterwards only mirrors the
changes the API confirmed.
"""

import logging
from typing import Any, MutableMapping, Optional

import streamlit as st

from services.exceptions import PantryAPIError
from services.pantry_api import PantryAPI

logger = logging.getLogger(__name__)

ACTIVE_PAGE_KEY = "active_page"


class PageController:
    """Shared state plumbing for the page controllers."""

    STATE_KEY = ""

    def __init__(
        self,
        api: Optional[PantryAPI] = None,
        state: Optional[MutableMapping[str, Any]] = None,
    ):
        self.api = api or PantryAPI()
        self._state = st.session_state if state is None else state
        self._init_session_state()

    def _default_state(self) -> dict:
        """Initial contents of this page's state slice."""
        return {}

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if self.STATE_KEY not in self._state:
            self._state[self.STATE_KEY] = {
                "loaded": False,
                "error": None,
                "load_error": None,
                **self._default_state(),
            }

    @property
    def page_state(self) -> dict:
        return self._state[self.STATE_KEY]

    # ==========================================
    # Loading
    # ==========================================

    def ensure_loaded(self) -> None:
        """Fetch on first render and whenever the user comes back to this page."""
        if self._state.get(ACTIVE_PAGE_KEY) != self.STATE_KEY or not self.page_state["loaded"]:
            self._state[ACTIVE_PAGE_KEY] = self.STATE_KEY
            self.reload()

    def reload(self) -> bool:
        """Re-fetch this page's collections. Returns False on API failure."""
        try:
            self._load()
        except PantryAPIError as e:
            self._fail(f"Could not load {self.STATE_KEY.replace('_', ' ')}", e)
            self.page_state["load_error"] = str(e)
            self.page_state["loaded"] = True
            return False

        self.page_state["loaded"] = True
        self.page_state["load_error"] = None
        return True

    def _load(self) -> None:
        """Fetch collections into page_state. Raises PantryAPIError."""
        raise NotImplementedError

    # ==========================================
    # Errors
    # ==========================================

    def _fail(self, action: str, error: PantryAPIError) -> None:
        """Log an API failure and keep its message for the view."""
        logger.error(f"{action}: {error}")
        self.page_state["error"] = f"{action}: {error}"

    def get_load_error(self) -> Optional[str]:
        """Message of the last failed load, if any."""
        return self.page_state.get("load_error")

    def pop_error(self) -> Optional[str]:
        """Return and clear the last error message."""
        error = self.page_state["error"]
        self.page_state["error"] = None
        return error
