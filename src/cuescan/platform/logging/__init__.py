"""Single import point for cuescan logging.

Where: platform/logging/__init__.py
What: Expose the shared ``logger``, its setup function and the Rich scan-event handler.
Why: Every layer logs through the same named logger without knowing how it is wired.
"""

from __future__ import annotations

from .config import DEFAULT_LOG_FILE, LOGGER_NAME, logger, setup_logger
from .handlers import WhitePathRichHandler

__all__ = [
    "DEFAULT_LOG_FILE",
    "LOGGER_NAME",
    "WhitePathRichHandler",
    "logger",
    "setup_logger",
]
