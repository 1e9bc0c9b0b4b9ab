"""
Summary: Structured event identifiers attached to lyrics log records.
Why: Let the console handler style lookups and saves without parsing messages.
"""

from __future__ import annotations

from enum import StrEnum


class LyricsEvent(StrEnum):
    """Values stored under ``extra={"lyrics_event": ...}``."""

    QUERY_START = "lyrics.query.start"
    QUERY_HIT = "lyrics.query.hit"
    QUERY_MISS = "lyrics.query.miss"
    QUERY_SKIP = "lyrics.query.skip"
    SAVE_START = "lyrics.save.start"
    SAVE_SUCCESS = "lyrics.save.success"
    SAVE_ERROR = "lyrics.save.error"
    DIRECTORY_CREATE = "lyrics.directory.create"


__all__ = ["LyricsEvent"]
