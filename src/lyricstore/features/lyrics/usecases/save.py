"""
Summary: Save lyrics through a temp file that is atomically moved into place.
Why: Readers and crashes must never observe a half-written lyric file.
"""

from __future__ import annotations

import contextlib
import uuid
from pathlib import Path

from lyricstore.features.lyrics.domain.errors import (
    CrossDomainMoveError,
    DirectoryCreateError,
    WriteError,
)
from lyricstore.features.lyrics.domain.models import LyricExtensions
from lyricstore.platform.logging import logger
from lyricstore.shared.cancellation import CancellationToken, OperationCancelledError

from .events import LyricsEvent
from .ports import LyricsFilesystemPort


def temp_file_path(temp_dir: Path, base_filename: str) -> Path:
    """Return a unique hidden temp path for ``base_filename`` inside ``temp_dir``."""

    return temp_dir / f".{base_filename}.{uuid.uuid4().hex}.tmp"


def ensure_lyrics_directory(
    lyrics_dir: Path,
    *,
    filesystem: LyricsFilesystemPort,
    cancel: CancellationToken,
) -> None:
    """Create ``lyrics_dir`` if needed; an existing directory is fine."""

    try:
        created = filesystem.create_directory(lyrics_dir, cancel)
    except OSError as exc:
        raise DirectoryCreateError(lyrics_dir, exc) from exc

    if created:
        logger.info(
            "Lyrics directory %s did not exist and was created",
            lyrics_dir,
            extra={"lyrics_event": LyricsEvent.DIRECTORY_CREATE, "lyrics_path": lyrics_dir},
        )


def save_lyrics(
    base_filename: str,
    lyrics_dir: Path,
    lyrics: str,
    *,
    is_timestamped: bool,
    extensions: LyricExtensions,
    filesystem: LyricsFilesystemPort,
    cancel: CancellationToken,
    temp_dir: Path | None = None,
) -> Path:
    """Write ``lyrics`` to ``<lyrics_dir>/<base_filename><ext>`` atomically.

    The content goes to a uniquely named temp file first, which is then
    moved over the destination. With no ``temp_dir`` the temp file sits in
    ``lyrics_dir`` so both share a storage domain.

    Returns:
        Path: The final destination path.

    Raises:
        DirectoryCreateError: If ``lyrics_dir`` cannot be created.
        WriteError: If the temp write or the move fails, or ``lyrics`` cannot
            be encoded.
        CrossDomainMoveError: If ``temp_dir`` and ``lyrics_dir`` are on
            different filesystems. The temp file is left for cleanup.
        OperationCancelledError: If ``cancel`` fires before the move.
    """
    ensure_lyrics_directory(lyrics_dir, filesystem=filesystem, cancel=cancel)

    destination = lyrics_dir / f"{base_filename}{extensions.for_mode(is_timestamped)}"
    temp_path = temp_file_path(temp_dir or lyrics_dir, base_filename)
    logger.info(
        "Saving lyrics to %s",
        destination,
        extra={
            "lyrics_event": LyricsEvent.SAVE_START,
            "lyrics_path": destination,
            "lyrics_dir": lyrics_dir,
        },
    )

    try:
        filesystem.write_new(temp_path, lyrics, cancel)
    except OperationCancelledError:
        _discard_temp(filesystem, temp_path)
        raise
    except (OSError, UnicodeEncodeError) as exc:
        _discard_temp(filesystem, temp_path)
        _log_failure(destination, lyrics_dir, exc)
        raise WriteError(destination, exc) from exc

    try:
        same_domain = filesystem.is_same_storage_domain(temp_path, lyrics_dir, cancel)
    except OperationCancelledError:
        _discard_temp(filesystem, temp_path)
        raise
    except OSError as exc:
        _discard_temp(filesystem, temp_path)
        _log_failure(destination, lyrics_dir, exc)
        raise WriteError(destination, exc) from exc

    if not same_domain:
        logger.warning(
            "Cannot save lyrics file. Temp path (%s) and output path (%s) are on different filesystems",
            temp_path,
            destination,
            extra={
                "lyrics_event": LyricsEvent.SAVE_ERROR,
                "lyrics_path": destination,
                "lyrics_dir": lyrics_dir,
                "error_message": "cross-filesystem move",
            },
        )
        raise CrossDomainMoveError(temp_path, destination)

    try:
        cancel.check()
        filesystem.move_overwrite(temp_path, destination, cancel)
    except OperationCancelledError:
        _discard_temp(filesystem, temp_path)
        raise
    except OSError as exc:
        _discard_temp(filesystem, temp_path)
        _log_failure(destination, lyrics_dir, exc)
        raise WriteError(destination, exc) from exc

    logger.info(
        "Successfully saved lyrics to %s",
        destination,
        extra={
            "lyrics_event": LyricsEvent.SAVE_SUCCESS,
            "lyrics_path": destination,
            "lyrics_dir": lyrics_dir,
        },
    )
    return destination


def _discard_temp(filesystem: LyricsFilesystemPort, temp_path: Path) -> None:
    with contextlib.suppress(OSError):
        filesystem.remove(temp_path)


def _log_failure(
    destination: Path, lyrics_dir: Path, exc: OSError | UnicodeError
) -> None:
    logger.error(
        "Failed to save lyrics to %s: %s",
        destination,
        exc,
        extra={
            "lyrics_event": LyricsEvent.SAVE_ERROR,
            "lyrics_path": destination,
            "lyrics_dir": lyrics_dir,
            "error_message": str(exc) or type(exc).__name__,
        },
    )


__all__ = ["ensure_lyrics_directory", "save_lyrics", "temp_file_path"]
