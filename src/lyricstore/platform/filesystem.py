"""Low-level filesystem helpers shared by adapters.

Where: platform/filesystem.py
What: Directory creation, chunked reads and durable exclusive writes.
Why: Keep raw ``os`` calls in one place so adapters stay thin.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from typing import Final

CHUNK_SIZE: Final[int] = 64 * 1024

Checkpoint = Callable[[], None]


def _noop() -> None:
    return None


def ensure_directory(path: Path) -> bool:
    """Create ``path`` and its parents; return False if it already existed.

    Raises:
        NotADirectoryError: If ``path`` exists but is not a directory.
    """
    try:
        path.mkdir(parents=True, exist_ok=False)
    except FileExistsError:
        if not path.is_dir():
            raise NotADirectoryError(f"{path} exists and is not a directory") from None
        return False
    return True


def path_exists(path: Path) -> bool:
    """Return True if ``path`` exists; errors other than absence propagate."""

    try:
        _ = os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        return False
    return True


def read_bytes_chunked(path: Path, *, checkpoint: Checkpoint = _noop) -> bytes:
    """Read ``path`` fully, calling ``checkpoint`` before every chunk."""

    chunks: list[bytes] = []
    with open(path, "rb") as handle:
        while True:
            checkpoint()
            chunk = handle.read(CHUNK_SIZE)
            if not chunk:
                break
            chunks.append(chunk)
    return b"".join(chunks)


def write_new_durable(path: Path, data: bytes, *, checkpoint: Checkpoint = _noop) -> None:
    """Create ``path`` exclusively and write ``data`` through to disk.

    The handle is flushed, fsynced and closed before returning.

    Raises:
        FileExistsError: If ``path`` already exists.
    """
    with open(path, "xb") as handle:
        view = memoryview(data)
        for offset in range(0, len(view), CHUNK_SIZE):
            checkpoint()
            _ = handle.write(view[offset : offset + CHUNK_SIZE])
        handle.flush()
        os.fsync(handle.fileno())


def nearest_existing_ancestor(path: Path) -> Path:
    """Return ``path`` or its closest ancestor that exists."""

    for candidate in (path, *path.parents):
        if path_exists(candidate):
            return candidate
    return Path(path.anchor or ".")


def same_device(first: Path, second: Path) -> bool:
    """Return True when both paths resolve to the same mounted device."""

    first_dev = os.stat(nearest_existing_ancestor(first)).st_dev
    second_dev = os.stat(nearest_existing_ancestor(second)).st_dev
    return first_dev == second_dev


__all__ = [
    "CHUNK_SIZE",
    "ensure_directory",
    "nearest_existing_ancestor",
    "path_exists",
    "read_bytes_chunked",
    "same_device",
    "write_new_durable",
]
