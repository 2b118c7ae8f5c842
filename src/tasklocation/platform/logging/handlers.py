"""
Summary: Rich console handler that styles location codec events.
Why: Make decode and encode outcomes scannable when inspecting many tokens.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class LocationRichHandler(RichHandler):
    """Rich handler rendering ``location_event`` records with icons and colors."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "location.decode.success": ("✅", "green"),
        "location.decode.error": ("⛔", "red"),
        "location.encode.success": ("📦", "cyan"),
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _render_location_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured location events, or ``None`` for plain records."""

        event = getattr(record, "location_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        token = getattr(record, "token", None)
        if isinstance(token, str):
            _ = body.append(repr(token), style=Style(color="white"))

        if event == "location.decode.success":
            kind = getattr(record, "kind", None)
            host = getattr(record, "host", None)
            _ = body.append(f" → {kind}")
            if host is not None:
                _ = body.append(f" @ {host}")
        elif event == "location.decode.error":
            error_message = getattr(record, "error_message", None)
            _ = body.append(" rejected")
            if error_message:
                _ = body.append(f" ({error_message})")
        elif event == "location.encode.success":
            kind = getattr(record, "kind", None)
            if kind:
                _ = body.append(f" ← {kind}")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        location_text = self._render_location_message(record)
        if location_text is not None:
            return location_text
        return super().render_message(record, message)


__all__ = ["LocationRichHandler"]
