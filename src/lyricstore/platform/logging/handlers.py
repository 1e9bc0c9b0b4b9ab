"""Rich console handler for lyricstore logs.

Where: platform/logging/handlers.py
What: Render structured lyrics events with icons and compact, coloured paths.
Why: Keep presentation concerns out of the logger bootstrap.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class WhitePathRichHandler(RichHandler):
    """Custom Rich handler that displays file paths in white."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "lyrics.query.start": ("🔎", "blue"),
        "lyrics.query.hit": ("🎤", "green"),
        "lyrics.query.miss": ("ℹ️", "yellow"),
        "lyrics.query.skip": ("↪️", "yellow"),
        "lyrics.save.start": ("💾", "cyan"),
        "lyrics.save.success": ("✅", "green"),
        "lyrics.save.error": ("⛔", "red"),
        "lyrics.directory.create": ("📁", "magenta"),
    }
    _EVENT_LABELS: ClassVar[dict[str, str]] = {
        "lyrics.query.start": "Looking up ",
        "lyrics.query.hit": "Found lyrics ",
        "lyrics.query.miss": "No lyrics for ",
        "lyrics.query.skip": "Skipped unreadable ",
        "lyrics.save.start": "Saving ",
        "lyrics.save.success": "Saved ",
        "lyrics.save.error": "Failed to save ",
        "lyrics.directory.create": "Created lyrics directory ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

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
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path with colored separators and compact rendering.

        Args:
            path: Absolute or relative path string to format.
            base: Optional base path used to relativize ``path`` when possible.

        Returns:
            Text: Formatted path with colored separators and ellipsis truncation.
        """
        pure_path = self._to_pure_path(path)
        base_path = self._to_pure_path(base) if base else None

        display_path: PurePath = pure_path
        if base_path is not None and self._is_relative_to(pure_path, base_path):
            relative_path = pure_path.relative_to(base_path)
            if str(relative_path) not in {"", "."}:
                display_path = relative_path

        separator = "\\" if isinstance(display_path, PureWindowsPath) else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT :]
            anchor = ""

        display_string = ""
        if anchor:
            display_string = anchor.rstrip("\\/") + separator
        if truncated:
            display_string += "…" + separator
        display_string += separator.join(body_parts)

        return self._style_path_string(display_string or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _is_relative_to(path: PurePath, other: PurePath) -> bool:
        try:
            _ = path.relative_to(other)
            return True
        except ValueError:
            return False

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        """Apply Rich styling to the rendered path string."""

        text = Text()
        separator_chars = {separator}
        if separator == "\\":
            separator_chars.add("/")

        for char in path_string:
            if char in separator_chars or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_lyrics_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured lyrics events with dedicated styling."""

        event = getattr(record, "lyrics_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        label = self._EVENT_LABELS.get(event)
        if label:
            _ = body.append(label)

        path = getattr(record, "lyrics_path", None)
        base = getattr(record, "lyrics_dir", None)
        if path:
            _ = body.append_text(
                self._format_path(str(path), base=str(base) if base else None)
            )
        else:
            title = getattr(record, "file_title", None)
            if title:
                _ = body.append(str(title))

        details: list[str] = []
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for lyrics events."""

        lyrics_text = self._render_lyrics_message(record)
        if lyrics_text is not None:
            return lyrics_text

        return super().render_message(record, message)


__all__ = ["WhitePathRichHandler"]
