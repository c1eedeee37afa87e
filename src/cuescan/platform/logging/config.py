"""Build the ``cuescan`` logger.

Where: platform/logging/config.py
What: Attach a Rich console handler on stderr and, on request, a rotating log file.
Why: Scan output on stdout (tables, JSON) must never interleave with log lines.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final

from rich.console import Console

from cuescan.config.paths import default_log_file

from .handlers import WhitePathRichHandler

LOGGER_NAME: Final[str] = "cuescan"
FILE_FORMAT: Final[str] = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
MAX_LOG_BYTES: Final[int] = 10 * 1024 * 1024
LOG_BACKUPS: Final[int] = 5

DEFAULT_LOG_FILE: Final[Path] = default_log_file()


def _console_handler(level: int) -> logging.Handler:
    handler = WhitePathRichHandler(console=Console(stderr=True, soft_wrap=True))
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    target = Path(log_file).expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        target, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """(Re)configure the shared logger and return it.

    Calling this again replaces the previous handlers, so the CLI can
    raise or lower verbosity after the import-time default is in place.

    Args:
        log_file: Rotating log destination. ``None`` keeps logging on the console only.
        console_level: Threshold for the stderr handler.
        file_level: Threshold for the file handler.
    """
    app_logger = logging.getLogger(LOGGER_NAME)
    app_logger.setLevel(logging.DEBUG)

    while app_logger.handlers:
        stale = app_logger.handlers.pop()
        stale.close()

    app_logger.addHandler(_console_handler(console_level))
    if log_file is not None:
        app_logger.addHandler(_file_handler(log_file, file_level))
    return app_logger


# Console only until the CLI knows where the user wants the log file.
logger: Final[logging.Logger] = setup_logger()


__all__ = ["DEFAULT_LOG_FILE", "LOGGER_NAME", "logger", "setup_logger"]
