"""
Summary: Lyric source backed by files in the profile's lyrics directory.
Why: Compose title resolution, lookup and save behind the host's source interface.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import ClassVar, final

from lyricstore.features.lyrics.domain.errors import TitleError
from lyricstore.features.lyrics.domain.models import (
    LyricExtensions,
    LyricRecord,
    lyrics_directory,
)
from lyricstore.features.lyrics.domain.sanitizer import FilenameSanitizer
from lyricstore.platform.logging import logger
from lyricstore.shared.cancellation import NEVER_CANCELLED, CancellationToken

from .events import LyricsEvent
from .filename_resolver import resolve_file_title
from .lookup import lookup_lyrics
from .ports import LyricsFilesystemPort, TitleFormatterPort
from .save import save_lyrics


@final
class LocalFileLyricSource:
    """Query and save lyrics as ``<profile>/lyrics/<title><ext>`` files.

    The template and profile directory are read through providers on every
    call so configuration changes apply without rebuilding the source.
    """

    SOURCE_ID: ClassVar[str] = "76d90970-1c98-4fe2-944e-ace493f38e85"
    FRIENDLY_NAME: ClassVar[str] = "Configuration Folder Files"

    def __init__(
        self,
        *,
        formatter: TitleFormatterPort,
        filesystem: LyricsFilesystemPort,
        template_provider: Callable[[], str],
        profile_dir_provider: Callable[[], Path],
        sanitizer: FilenameSanitizer | None = None,
        extensions: LyricExtensions | None = None,
        temp_dir: Path | None = None,
    ) -> None:
        self.formatter = formatter
        self.filesystem = filesystem
        self.template_provider = template_provider
        self.profile_dir_provider = profile_dir_provider
        self.sanitizer = sanitizer or FilenameSanitizer()
        self.extensions = extensions or LyricExtensions()
        self.temp_dir = temp_dir

    @property
    def id(self) -> str:
        return self.SOURCE_ID

    @property
    def friendly_name(self) -> str:
        return self.FRIENDLY_NAME

    @property
    def can_save(self) -> bool:
        return True

    def lyrics_dir(self) -> Path:
        return lyrics_directory(self.profile_dir_provider())

    def file_title(self, track: object) -> str:
        """Resolve the sanitized base file name for ``track``."""

        return resolve_file_title(
            track,
            self.template_provider(),
            formatter=self.formatter,
            sanitizer=self.sanitizer,
        )

    def query(
        self, track: object, cancel: CancellationToken = NEVER_CANCELLED
    ) -> LyricRecord:
        """Look up lyrics for ``track``; title errors yield an empty record."""

        try:
            file_title = self.file_title(track)
        except TitleError as exc:
            logger.error("Failed to determine query file title: %s", exc)
            return LyricRecord(source_id=self.id, persistent_storage_path="")

        logger.info(
            "Querying for lyrics in local files for %s...",
            file_title,
            extra={"lyrics_event": LyricsEvent.QUERY_START, "file_title": file_title},
        )
        return lookup_lyrics(
            file_title,
            self.lyrics_dir(),
            extensions=self.extensions,
            filesystem=self.filesystem,
            cancel=cancel,
            source_id=self.id,
        )

    def save(
        self,
        track: object,
        is_timestamped: bool,
        lyrics: str,
        cancel: CancellationToken = NEVER_CANCELLED,
    ) -> Path:
        """Save ``lyrics`` for ``track`` and return the destination path.

        Raises:
            TitleError: If no file title can be resolved for ``track``.
            LyricSourceError: For directory, write and cross-filesystem failures.
            OperationCancelledError: If ``cancel`` fires.
        """
        logger.info("Saving lyrics to a local file...")
        try:
            file_title = self.file_title(track)
        except TitleError as exc:
            logger.error("Failed to determine save file title: %s", exc)
            raise

        return save_lyrics(
            file_title,
            self.lyrics_dir(),
            lyrics,
            is_timestamped=is_timestamped,
            extensions=self.extensions,
            filesystem=self.filesystem,
            cancel=cancel,
            temp_dir=self.temp_dir,
        )


__all__ = ["LocalFileLyricSource"]
