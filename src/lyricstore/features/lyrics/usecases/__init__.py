"""
Summary: Use cases of the lyrics feature: resolve, look up and save lyric files.
Why: Expose one import path for hosts wiring the local lyric source.
"""

from __future__ import annotations

from .events import LyricsEvent
from .filename_resolver import resolve_file_title
from .local_source import LocalFileLyricSource
from .lookup import lookup_lyrics
from .ports import (
    FormatScript,
    LyricSource,
    LyricsFilesystemPort,
    TitleEvaluation,
    TitleFormatterPort,
)
from .save import ensure_lyrics_directory, save_lyrics, temp_file_path

__all__ = [
    "FormatScript",
    "LocalFileLyricSource",
    "LyricSource",
    "LyricsEvent",
    "LyricsFilesystemPort",
    "TitleEvaluation",
    "TitleFormatterPort",
    "ensure_lyrics_directory",
    "lookup_lyrics",
    "resolve_file_title",
    "save_lyrics",
    "temp_file_path",
]
