"""src/lyricstore/features/lyrics/adapters/filesystem_adapter.py
What: Adapter implementing LyricsFilesystemPort on top of platform helpers.
Why: Keep filesystem I/O in adapters while use cases target abstractions."""

from __future__ import annotations

import os
from pathlib import Path

from lyricstore.features.lyrics.usecases.ports import LyricsFilesystemPort
from lyricstore.platform.filesystem import (
    ensure_directory,
    path_exists,
    read_bytes_chunked,
    same_device,
    write_new_durable,
)
from lyricstore.shared.cancellation import CancellationToken


class LocalLyricsFilesystem(LyricsFilesystemPort):
    """Adapter reading and writing UTF-8 lyric files on the local disk."""

    encoding: str = "utf-8"

    def exists(self, path: Path, cancel: CancellationToken) -> bool:
        cancel.check()
        return path_exists(path)

    def read_text(self, path: Path, cancel: CancellationToken) -> str:
        cancel.check()
        data = read_bytes_chunked(path, checkpoint=cancel.check)
        # utf-8-sig drops a leading BOM; newlines are returned untouched
        return data.decode("utf-8-sig")

    def create_directory(self, path: Path, cancel: CancellationToken) -> bool:
        cancel.check()
        return ensure_directory(path)

    def write_new(self, path: Path, content: str, cancel: CancellationToken) -> None:
        cancel.check()
        # read_text strips one BOM, so content starting with U+FEFF gets another
        encoding = "utf-8-sig" if content.startswith("\ufeff") else self.encoding
        write_new_durable(path, content.encode(encoding), checkpoint=cancel.check)

    def move_overwrite(self, source: Path, destination: Path, cancel: CancellationToken) -> None:
        cancel.check()
        os.replace(source, destination)

    def is_same_storage_domain(self, first: Path, second: Path, cancel: CancellationToken) -> bool:
        cancel.check()
        return same_device(first, second)

    def remove(self, path: Path) -> None:
        path.unlink(missing_ok=True)


__all__ = ["LocalLyricsFilesystem"]
