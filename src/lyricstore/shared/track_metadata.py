# Where: lyricstore.shared.track_metadata
# What: Canonical TrackMetadata dataclass understood by the bundled formatter.
# Why: Give hosts and tests a concrete track handle without tying use cases to it.

from dataclasses import dataclass


@dataclass(frozen=True)
class TrackMetadata:
    """Metadata for a music track."""

    title: str | None = None
    artist: str | None = None
    album: str | None = None
    album_artist: str | None = None
    genre: str | None = None
    year: int | None = None
    track_number: int | None = None
    track_total: int | None = None
    disc_number: int | None = None
    disc_total: int | None = None


__all__ = ["TrackMetadata"]
