"""Rich console handler that renders Ghostscript lifecycle events.

Where: platform/logging/handlers.py
What: Style ``engine_event`` log records with icons, colours and compact paths.
Why: Keep engine progress readable next to the interactive prompts.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class EngineEventRichHandler(RichHandler):
    """Custom Rich handler that displays engine events and paths compactly."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "engine.start": ("🚀", "cyan"),
        "engine.success": ("✅", "green"),
        "engine.error": ("⛔", "red"),
        "engine.cleanup": ("🧹", "yellow"),
    }
    _EVENT_PREFIXES: ClassVar[dict[str, str]] = {
        "engine.start": "Running Ghostscript",
        "engine.success": "Ghostscript finished",
        "engine.error": "Ghostscript failed",
        "engine.cleanup": "Removed partial output",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 3

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path with coloured separators, keeping the last few segments."""

        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]
            display_string = "…" + separator + separator.join(body_parts)
        elif anchor:
            display_string = anchor.rstrip("\\/") + separator + separator.join(body_parts)
        else:
            display_string = separator.join(body_parts) or "."

        text = Text()
        for char in display_string:
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _render_engine_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured engine events with dedicated styling."""

        event = getattr(record, "engine_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(self._EVENT_PREFIXES.get(event, "Ghostscript"))

        operation = getattr(record, "operation", None)
        if isinstance(operation, str) and event != "engine.cleanup":
            _ = body.append(f" ({operation})")

        output_path = getattr(record, "output_path", None)
        if output_path:
            _ = body.append(" → " if event != "engine.cleanup" else " ")
            _ = body.append_text(self._format_path(str(output_path)))

        details: list[str] = []
        if event == "engine.start":
            source_count = getattr(record, "source_count", None)
            if isinstance(source_count, int):
                details.append(f"inputs={source_count}")
            profile = getattr(record, "profile", None)
            if profile:
                details.append(f"profile={profile}")
        elif event == "engine.success":
            duration_ms = getattr(record, "duration_ms", None)
            if isinstance(duration_ms, (int, float)):
                details.append(f"{duration_ms:.0f} ms")
        elif event == "engine.error":
            returncode = getattr(record, "returncode", None)
            if isinstance(returncode, int):
                details.append(f"exit={returncode}")
            error_message = getattr(record, "error_message", None)
            if error_message:
                details.append(str(error_message))
        if details:
            _ = body.append(" [" + ", ".join(details) + "]")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for engine events."""

        engine_text = self._render_engine_message(record)
        if engine_text is not None:
            return engine_text

        return super().render_message(record, message)


__all__ = ["EngineEventRichHandler"]
