"""
Logging setup for the dashboard.

Streamlit re-executes page scripts on every interaction, so the handler
is only installed once per process.
"""

import logging

from config.settings import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging(level: str | None = None) -> None:
    """Attach a stream handler to the root logger at the configured level."""
    global _configured
    if _configured:
        return

    level_name = (level or get_settings().log_level).upper()
    root = logging.getLogger()
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level_name, logging.INFO))

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

    _configured = True
