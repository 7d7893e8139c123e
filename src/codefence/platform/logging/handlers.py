"""Rich console handler for diagnostic output.

Where: platform/logging/handlers.py
What: Render warnings and errors as single prefixed lines with styled paths.
Why: Keep diagnostics readable on stderr without Rich markup touching file names.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class DiagnosticRichHandler(RichHandler):
    """Rich handler that prints ``Warning:``/``Error:`` prefixed diagnostics."""

    _LEVEL_PREFIXES: ClassVar[dict[int, tuple[str, str]]] = {
        logging.WARNING: ("Warning: ", "yellow"),
        logging.ERROR: ("Error: ", "red"),
        logging.CRITICAL: ("Error: ", "red"),
    }
    _SEPARATOR_CHARS: ClassVar[frozenset[str]] = frozenset({"/", "\\"})

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False  # Prefixes are rendered by render_message
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    @classmethod
    def _style_path_string(cls, path_string: str, color: str = "white") -> Text:
        """Apply Rich styling to a rendered path, highlighting separators."""

        text = Text()
        for char in path_string:
            if char in cls._SEPARATOR_CHARS:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color=color))
        return text

    def _render_body(self, record: logging.LogRecord, message: str, color: str | None) -> Text:
        """Render the message, styling the ``subject`` path when it is present."""

        body_style = Style(color=color) if color else Style()
        subject = getattr(record, "subject", None)
        if not isinstance(subject, str) or not subject or subject not in message:
            return Text(message, style=body_style)

        before, _, after = message.partition(subject)
        text = Text()
        _ = text.append(before, style=body_style)
        _ = text.append_text(self._style_path_string(subject))
        _ = text.append(after, style=body_style)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with a level prefix and styled subject path."""

        prefix = self._LEVEL_PREFIXES.get(record.levelno)
        if prefix is None:
            if getattr(record, "selection_event", None) is None:
                return super().render_message(record, message)
            return self._render_body(record, message, None)

        label, color = prefix
        text = Text()
        _ = text.append(label, style=Style(color=color, bold=True))
        _ = text.append_text(self._render_body(record, message, color))
        return text

    @override
    def emit(self, record: logging.LogRecord) -> None:
        """Print each record as exactly one unwrapped, unpadded line.

        Records carrying a traceback keep RichHandler's table layout.
        """
        if record.exc_info:
            super().emit(record)
            return

        try:
            message = self.format(record)
            self.console.print(self.render_message(record, message), soft_wrap=True)
        except Exception:
            self.handleError(record)


__all__ = ["DiagnosticRichHandler"]
