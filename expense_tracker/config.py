"""Configuration management for the expense tracker.

This module centralizes display constants and the few values that can be
overridden through environment variables.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

APP_TITLE = "Expense Tracker"
APP_ICON = "💰"

# Display locale is fixed to India
CURRENCY_SYMBOL = "₹"
DATE_FORMAT = "%b %d, %Y"

LOG_LEVEL = os.getenv("EXPENSE_TRACKER_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_DEFAULT_RECENT_LIMIT = 5


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r, using %d", name, raw, default)
        return default
    if value < 0:
        logger.warning("Ignoring negative %s=%r, using %d", name, raw, default)
        return default
    return value


RECENT_TRANSACTIONS_LIMIT = _int_from_env("EXPENSE_TRACKER_RECENT_LIMIT", _DEFAULT_RECENT_LIMIT)


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once for the running app.

    ``logging.basicConfig`` is a no-op when handlers already exist, so
    Streamlit reruns calling this repeatedly is harmless.
    """
    resolved = (level or LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, resolved, logging.INFO), format=LOG_FORMAT)
