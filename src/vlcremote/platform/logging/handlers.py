"""Rich console handler for request-oriented log records.

Where: platform/logging/handlers.py
What: Render ``request_event`` extras emitted by the VLC client with icons.
Why: Keep the CLI output readable without teaching the client about Rich.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class RequestRichHandler(RichHandler):
    """Rich handler that styles request lifecycle events."""

    _REQUEST_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "request.start": ("📡", "cyan"),
        "request.success": ("✅", "green"),
        "request.error": ("❌", "red"),
        "request.rejected": ("⛔", "yellow"),
    }
    _QUERY_SEPARATORS: ClassVar[frozenset[str]] = frozenset({"?", "&", "="})

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_endpoint(self, endpoint: str) -> Text:
        """Render an endpoint with its query separators highlighted."""

        text = Text()
        path, _, query = endpoint.partition("?")
        _ = text.append(path, style=Style(color="white", bold=True))
        if not query:
            return text

        _ = text.append("?", style=Style(color="magenta"))
        for char in query:
            if char in self._QUERY_SEPARATORS:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_request_message(self, record: logging.LogRecord) -> Text | None:
        event = getattr(record, "request_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._REQUEST_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        prefix = {
            "request.start": "GET ",
            "request.success": "OK ",
            "request.error": "Failed ",
            "request.rejected": "Rejected ",
        }.get(event, "")
        _ = body.append(prefix)

        endpoint = getattr(record, "endpoint", None)
        operation = getattr(record, "operation", None)
        if endpoint:
            _ = body.append_text(self._format_endpoint(str(endpoint)))
        elif operation:
            _ = body.append(str(operation))

        metrics: list[str] = []
        status_code = getattr(record, "status_code", None)
        if isinstance(status_code, int):
            metrics.append(f"status={status_code}")
        size = getattr(record, "response_bytes", None)
        if isinstance(size, int):
            metrics.append(f"{size} B")
        duration_ms = getattr(record, "duration_ms", None)
        if isinstance(duration_ms, (int, float)):
            metrics.append(f"{duration_ms:.2f} ms")
        error_message = getattr(record, "error_message", None)
        if error_message:
            metrics.append(str(error_message))
        if metrics:
            _ = body.append(" (" + ", ".join(metrics) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render request events specially and defer everything else to Rich."""

        request_text = self._render_request_message(record)
        if request_text is not None:
            return request_text
        return super().render_message(record, message)


__all__ = ["RequestRichHandler"]
