"""
Summary: Ports defining the lyrics use case dependencies.
Why: Decouple use cases from concrete adapters so tests and host swaps stay simple.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from lyricstore.features.lyrics.domain.models import LyricRecord
from lyricstore.shared.cancellation import CancellationToken


class FormatScript(Protocol):
    """Opaque compiled form of a filename template."""


@dataclass(frozen=True, slots=True)
class TitleEvaluation:
    """Formatter output; ``text`` may be partial when ``success`` is False."""

    text: str
    success: bool = True


@runtime_checkable
class TitleFormatterPort(Protocol):
    """Port for the host's title-formatting engine."""

    def compile(self, template: str) -> FormatScript:
        """Compile ``template``; raise ``TemplateCompileError`` when invalid."""
        ...

    def evaluate(self, script: FormatScript, track: object) -> TitleEvaluation:
        """Render ``script`` against ``track`` metadata."""
        ...


@runtime_checkable
class LyricsFilesystemPort(Protocol):
    """Port abstracting the filesystem calls lyric lookups and saves need.

    Every method observes ``cancel`` and raises ``OperationCancelledError``
    once it fires.
    """

    def exists(self, path: Path, cancel: CancellationToken) -> bool:
        """Return True if ``path`` exists; raise ``OSError`` when it cannot be checked."""
        ...

    def read_text(self, path: Path, cancel: CancellationToken) -> str:
        """Read the whole file as text."""
        ...

    def create_directory(self, path: Path, cancel: CancellationToken) -> bool:
        """Create ``path`` if missing; return True when it was created."""
        ...

    def write_new(self, path: Path, content: str, cancel: CancellationToken) -> None:
        """Create ``path`` exclusively, write ``content`` and flush it to disk."""
        ...

    def move_overwrite(self, source: Path, destination: Path, cancel: CancellationToken) -> None:
        """Replace ``destination`` with ``source`` in one step."""
        ...

    def is_same_storage_domain(self, first: Path, second: Path, cancel: CancellationToken) -> bool:
        """Return True when a move between the two paths can be atomic."""
        ...

    def remove(self, path: Path) -> None:
        """Delete ``path`` if present."""
        ...


@runtime_checkable
class LyricSource(Protocol):
    """Surface a host expects from a pluggable lyric source."""

    @property
    def id(self) -> str: ...

    @property
    def friendly_name(self) -> str: ...

    @property
    def can_save(self) -> bool: ...

    def query(self, track: object, cancel: CancellationToken) -> LyricRecord:
        """Look lyrics up; an empty record means nothing was found."""
        ...

    def save(
        self,
        track: object,
        is_timestamped: bool,
        lyrics: str,
        cancel: CancellationToken,
    ) -> Path:
        """Persist ``lyrics`` and return the final storage path."""
        ...


__all__ = [
    "FormatScript",
    "LyricSource",
    "LyricsFilesystemPort",
    "TitleEvaluation",
    "TitleFormatterPort",
]
