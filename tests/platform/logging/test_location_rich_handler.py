"""Tests for the ``LocationRichHandler`` event rendering."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Any

from rich.console import Console
from rich.text import Text

from tasklocation.platform.logging import LocationRichHandler


def _make_handler() -> LocationRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return LocationRichHandler(console=console)


def _build_record(message: str = "", **extras: Any) -> logging.LogRecord:
    record = logging.LogRecord(
        name="tasklocation",
        level=logging.INFO,
        pathname="test",
        lineno=0,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_render_decode_success() -> None:
    handler = _make_handler()
    record = _build_record(
        location_event="location.decode.success",
        token="executor_h1_7",
        kind="executor_cache",
        host="h1",
    )

    rendered = handler.render_message(record, "")

    assert isinstance(rendered, Text)
    assert rendered.plain == "✅ 'executor_h1_7' → executor_cache @ h1"


def test_render_decode_error_includes_message() -> None:
    handler = _make_handler()
    record = _build_record(
        location_event="location.decode.error",
        token="executor_bad",
        error_message="Illegal executor location format: executor_bad",
    )

    rendered = handler.render_message(record, "")

    assert isinstance(rendered, Text)
    assert rendered.plain.startswith("⛔ 'executor_bad' rejected")
    assert "Illegal executor location format" in rendered.plain


def test_render_encode_success() -> None:
    handler = _make_handler()
    record = _build_record(
        location_event="location.encode.success",
        token="hdfs_cache_h2",
        kind="hdfs_cache",
    )

    rendered = handler.render_message(record, "")

    assert isinstance(rendered, Text)
    assert rendered.plain == "📦 'hdfs_cache_h2' ← hdfs_cache"


def test_plain_records_fall_back_to_rich_rendering() -> None:
    handler = _make_handler()
    record = _build_record("Configuration saved")

    rendered = handler.render_message(record, "Configuration saved")

    assert isinstance(rendered, Text)
    assert rendered.plain == "Configuration saved"
