"""Unit tests for the preview script's logging setup."""

from __future__ import annotations

from collections.abc import Iterator
import logging
from pathlib import Path

import pytest

from gauge_layout.logging_config import (
    CONSOLE_HANDLER_NAME,
    FILE_HANDLER_NAME,
    LOGGER_NAME,
    setup_logging,
)


@pytest.fixture()
def package_logger() -> Iterator[logging.Logger]:
    """Give each test the package logger and restore its handlers and level after."""
    logger: logging.Logger = logging.getLogger(LOGGER_NAME)
    saved_handlers: list[logging.Handler] = list(logger.handlers)
    saved_level: int = logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in saved_handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(saved_level)


def handler_names(logger: logging.Logger) -> list[str | None]:
    """Return the names of the handlers attached to `logger`."""
    return [handler.get_name() for handler in logger.handlers]


def test_setup_logging_twice_keeps_one_console_handler(
    package_logger: logging.Logger,
) -> None:
    """A second call replaces the first call's handler instead of adding another."""
    setup_logging(logging.INFO)
    setup_logging(logging.DEBUG)
    assert handler_names(package_logger).count(CONSOLE_HANDLER_NAME) == 1
    assert package_logger.level == logging.DEBUG


def test_setup_logging_leaves_foreign_handlers_alone(
    package_logger: logging.Logger,
) -> None:
    """Handlers attached by someone else survive setup."""
    foreign: logging.Handler = logging.NullHandler()
    package_logger.addHandler(foreign)
    setup_logging(logging.INFO)
    setup_logging(logging.INFO)
    assert foreign in package_logger.handlers
    package_logger.removeHandler(foreign)


def test_setup_logging_writes_log_file(
    package_logger: logging.Logger, tmp_path: Path
) -> None:
    """The optional file handler receives the package's records."""
    log_file: Path = tmp_path / "logs" / "preview.log"
    logger: logging.Logger = setup_logging(logging.INFO, log_file=log_file)
    assert logger is package_logger
    assert FILE_HANDLER_NAME in handler_names(logger)

    logging.getLogger(f"{LOGGER_NAME}.layout").info("resolved domain")
    for handler in logger.handlers:
        handler.flush()
    assert "resolved domain" in log_file.read_text(encoding="utf-8")

    # Dropping the file on a later call removes its handler.
    setup_logging(logging.INFO)
    assert FILE_HANDLER_NAME not in handler_names(logger)
