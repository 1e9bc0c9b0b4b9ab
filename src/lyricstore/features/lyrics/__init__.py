"""
Summary: Public entry points for the local-file lyric source.
Why: Wire default adapters from configuration behind one factory.
"""

from __future__ import annotations

from lyricstore.config.config import Config
from lyricstore.platform.logging import setup_logger

from .adapters import LocalLyricsFilesystem, PlaceholderTitleFormatter
from .domain import (
    FilenameSanitizer,
    LyricExtensions,
    LyricRecord,
    LyricSourceError,
    rules_for_platform,
)
from .usecases import LocalFileLyricSource, LyricsFilesystemPort, TitleFormatterPort


def build_local_source(
    config: Config | None = None,
    *,
    formatter: TitleFormatterPort | None = None,
    filesystem: LyricsFilesystemPort | None = None,
) -> LocalFileLyricSource:
    """Build a ``LocalFileLyricSource`` using ``config`` or the loaded configuration.

    Without an explicit ``config`` the template and profile directory are
    read from ``Config.load()`` on each call. ``filename_rules``,
    ``lyric_extensions`` and ``temp_dir`` are fixed when the source is built;
    build a new source to apply changes to them. A configured ``log_file``
    adds a rotating file handler to the package logger.
    """

    settings = config or Config.load()
    if settings.log_file is not None:
        _ = setup_logger(log_file=settings.log_file)

    def _current() -> Config:
        return config if config is not None else Config.load()

    return LocalFileLyricSource(
        formatter=formatter or PlaceholderTitleFormatter(),
        filesystem=filesystem or LocalLyricsFilesystem(),
        template_provider=lambda: _current().filename_format,
        profile_dir_provider=lambda: _current().resolved_profile_dir(),
        sanitizer=FilenameSanitizer(rules_for_platform(settings.filename_rules)),
        extensions=LyricExtensions.from_iterable(settings.lyric_extensions),
        temp_dir=settings.temp_dir,
    )


__all__ = [
    "LocalFileLyricSource",
    "LyricRecord",
    "LyricSourceError",
    "build_local_source",
]
