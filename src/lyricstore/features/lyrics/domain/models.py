"""
Summary: Value types for lyric lookups and the ordered extension list.
Why: Keep record shape and extension priority as data, not control flow.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Final

LYRICS_DIR_NAME: Final[str] = "lyrics"
TIMESTAMPED_EXTENSION: Final[str] = ".lrc"
PLAIN_EXTENSION: Final[str] = ".txt"


def lyrics_directory(profile_dir: Path) -> Path:
    """Return ``<profile_dir>/lyrics``."""

    return profile_dir / LYRICS_DIR_NAME


@dataclass(frozen=True, slots=True)
class LyricRecord:
    """Raw lyrics returned by a source query."""

    source_id: str
    persistent_storage_path: str
    text: str = ""

    @property
    def found(self) -> bool:
        return bool(self.text)


@dataclass(frozen=True, slots=True)
class LyricExtensions:
    """Candidate extensions, highest priority first."""

    candidates: tuple[str, ...] = (TIMESTAMPED_EXTENSION, PLAIN_EXTENSION)
    timestamped: str = TIMESTAMPED_EXTENSION
    plain: str = PLAIN_EXTENSION

    def __post_init__(self) -> None:
        if not self.candidates:
            raise ValueError("At least one lyric extension is required")
        seen: set[str] = set()
        for ext in self.candidates:
            if not ext.startswith(".") or len(ext) < 2:
                raise ValueError(f"Lyric extension must start with a dot: {ext!r}")
            if ext.lower() in seen:
                raise ValueError(f"Duplicate lyric extension: {ext!r}")
            seen.add(ext.lower())
        for mode_ext in (self.timestamped, self.plain):
            if mode_ext not in self.candidates:
                raise ValueError(
                    f"Save extension {mode_ext!r} must be one of the lookup candidates"
                )

    @classmethod
    def from_iterable(cls, extensions: Iterable[str]) -> LyricExtensions:
        """Build from configuration data, keeping the given order."""

        return cls(candidates=tuple(extensions))

    def for_mode(self, is_timestamped: bool) -> str:
        """Return the extension a save in the given mode writes."""

        return self.timestamped if is_timestamped else self.plain

    def __iter__(self) -> Iterator[str]:
        return iter(self.candidates)


__all__ = [
    "LYRICS_DIR_NAME",
    "LyricExtensions",
    "LyricRecord",
    "PLAIN_EXTENSION",
    "TIMESTAMPED_EXTENSION",
    "lyrics_directory",
]
