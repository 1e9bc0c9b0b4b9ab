"""
Summary: Exception taxonomy for resolving, reading and saving lyric files.
Why: Let callers tell fatal save failures apart from recoverable lookup misses.
"""

from __future__ import annotations

from pathlib import Path

from lyricstore.shared.cancellation import OperationCancelledError


class LyricSourceError(Exception):
    """Base class for lyric source failures."""


class TitleError(LyricSourceError):
    """The file title for a track could not be determined."""


class TemplateCompileError(TitleError):
    """The filename format template is syntactically invalid."""

    def __init__(self, template: str, reason: str) -> None:
        super().__init__(f"Invalid filename format {template!r}: {reason}")
        self.template = template
        self.reason = reason


class TitleFormatError(TitleError):
    """The template compiled but could not be evaluated for a track.

    ``partial_title`` holds whatever the formatter produced, sanitized.
    """

    def __init__(self, message: str, *, partial_title: str = "") -> None:
        super().__init__(message)
        self.partial_title = partial_title


class DirectoryCreateError(LyricSourceError):
    """The lyrics directory could not be created."""

    def __init__(self, directory: Path, cause: OSError) -> None:
        super().__init__(f"Failed to create lyrics directory {directory}: {cause}")
        self.directory = directory


class WriteError(LyricSourceError):
    """Writing or moving the lyric file failed; the destination is untouched."""

    def __init__(self, destination: Path, cause: OSError | UnicodeError) -> None:
        super().__init__(f"Failed to write lyrics to {destination}: {cause}")
        self.destination = destination


class CrossDomainMoveError(LyricSourceError):
    """Temp file and destination live on different storage domains."""

    def __init__(self, temp_path: Path, destination: Path) -> None:
        super().__init__(
            f"Cannot move {temp_path} to {destination} atomically: "
            "they are on different filesystems"
        )
        self.temp_path = temp_path
        self.destination = destination


__all__ = [
    "CrossDomainMoveError",
    "DirectoryCreateError",
    "LyricSourceError",
    "OperationCancelledError",
    "TemplateCompileError",
    "TitleError",
    "TitleFormatError",
    "WriteError",
]
