"""
Console and file logging for the preview script.

The geometry modules only create module loggers under `gauge_layout`; they
never install handlers. `setup_logging` is called from entry points and
manages its own handlers only, so handlers attached by an embedding
application (or by pytest's caplog) stay in place.
"""

from __future__ import annotations

import logging
from pathlib import Path
import sys

LOGGER_NAME: str = "gauge_layout"
LOG_FORMAT: str = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
LOG_DATE_FORMAT: str = "%H:%M:%S"

# Handler names owned by setup_logging.
CONSOLE_HANDLER_NAME: str = "gauge_layout.console"
FILE_HANDLER_NAME: str = "gauge_layout.file"
_OWN_HANDLER_NAMES: frozenset[str] = frozenset({CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME})


def _remove_own_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if handler.get_name() in _OWN_HANDLER_NAMES:
            logger.removeHandler(handler)
            handler.close()


def setup_logging(
    level: int = logging.INFO,
    log_file: Path | None = None,
) -> logging.Logger:
    """Attach the console handler (and optionally a file handler) to the package logger.

    Repeated calls replace the handlers from the previous call instead of
    stacking them.
    """
    logger: logging.Logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    _remove_own_handlers(logger)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging to console%s.", f" and {log_file}" if log_file else "")
    return logger
