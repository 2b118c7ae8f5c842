"""Tests for logger bootstrap."""

from __future__ import annotations

import logging
import logging.handlers
from io import StringIO
from pathlib import Path

from rich.console import Console

from tasklocation.platform.logging import LOGGER_NAME, LocationRichHandler, setup_logger


def test_console_only_by_default() -> None:
    logger = setup_logger(console_level=logging.WARNING)

    assert logger.name == LOGGER_NAME
    assert len(logger.handlers) == 1
    handler = logger.handlers[0]
    assert isinstance(handler, LocationRichHandler)
    assert handler.level == logging.WARNING


def test_file_handler_is_attached(tmp_path: Path) -> None:
    log_file = tmp_path / "nested" / "tasklocation.log"

    logger = setup_logger(log_file=log_file, file_level=logging.INFO)
    try:
        file_handlers = [
            h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        assert file_handlers[0].level == logging.INFO

        logger.info("hello %s", "file")
        file_handlers[0].flush()
        assert "hello file" in log_file.read_text(encoding="utf-8")
    finally:
        _ = setup_logger()


def test_setup_replaces_previous_handlers() -> None:
    stream = StringIO()
    console = Console(file=stream, force_terminal=False, width=200)

    _ = setup_logger()
    logger = setup_logger(console=console)
    try:
        assert len(logger.handlers) == 1
        logger.info("only once")
        assert stream.getvalue().count("only once") == 1
    finally:
        _ = setup_logger()
