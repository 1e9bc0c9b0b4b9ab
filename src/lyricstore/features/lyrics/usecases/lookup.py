"""
Summary: Probe the lyrics directory for a title's candidate files in priority order.
Why: A damaged or locked candidate must not hide a readable fallback.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from lyricstore.features.lyrics.domain.models import LyricRecord
from lyricstore.platform.logging import logger
from lyricstore.shared.cancellation import CancellationToken

from .events import LyricsEvent
from .ports import LyricsFilesystemPort


def lookup_lyrics(
    base_filename: str,
    lyrics_dir: Path,
    *,
    extensions: Iterable[str],
    filesystem: LyricsFilesystemPort,
    cancel: CancellationToken,
    source_id: str,
) -> LyricRecord:
    """Return the first readable ``<lyrics_dir>/<base_filename><ext>``.

    The first existing candidate wins. Candidates that fail to stat or read
    are logged and skipped. When nothing is found the record carries empty
    text and the extension-less path prefix. ``OperationCancelledError``
    always propagates.
    """
    prefix = lyrics_dir / base_filename

    for ext in extensions:
        file_path = prefix.with_name(prefix.name + ext)
        cancel.check()
        logger.debug("Querying for lyrics from %s", file_path)

        try:
            if not filesystem.exists(file_path, cancel):
                continue
            text = filesystem.read_text(file_path, cancel)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(
                "Failed to open lyrics file %s: %s",
                file_path,
                exc,
                extra={
                    "lyrics_event": LyricsEvent.QUERY_SKIP,
                    "lyrics_path": file_path,
                    "lyrics_dir": lyrics_dir,
                    "error_message": str(exc) or type(exc).__name__,
                },
            )
            continue

        logger.info(
            "Successfully retrieved lyrics from %s",
            file_path,
            extra={
                "lyrics_event": LyricsEvent.QUERY_HIT,
                "lyrics_path": file_path,
                "lyrics_dir": lyrics_dir,
            },
        )
        return LyricRecord(
            source_id=source_id,
            persistent_storage_path=str(file_path),
            text=text,
        )

    logger.info(
        "Failed to find lyrics in local files for %s",
        base_filename,
        extra={"lyrics_event": LyricsEvent.QUERY_MISS, "file_title": base_filename},
    )
    return LyricRecord(source_id=source_id, persistent_storage_path=str(prefix))


__all__ = ["lookup_lyrics"]
