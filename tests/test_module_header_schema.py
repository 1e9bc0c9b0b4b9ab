"""
Summary: Validate Summary/Why header docstring schema for lyrics feature modules.
Why: Prevent regression to inconsistent header formats across touched files.
"""

from __future__ import annotations

from pathlib import Path

import pytest

HEADER_OPEN: str = '"""'
HEADER_CLOSE: str = '"""'
SUMMARY_PREFIX: str = "Summary: "
WHY_PREFIX: str = "Why: "
SUMMARY_OFFSET: int = 1
WHY_OFFSET: int = 2
CLOSE_OFFSET: int = 3
HEADER_LENGTH: int = 4

REPO_ROOT: Path = Path(__file__).resolve().parents[1]

TARGET_MODULES: tuple[Path, ...] = (
    Path("src/lyricstore/features/lyrics/__init__.py"),
    Path("src/lyricstore/features/lyrics/domain/errors.py"),
    Path("src/lyricstore/features/lyrics/domain/models.py"),
    Path("src/lyricstore/features/lyrics/domain/sanitizer.py"),
    Path("src/lyricstore/features/lyrics/usecases/ports.py"),
    Path("src/lyricstore/features/lyrics/usecases/filename_resolver.py"),
    Path("src/lyricstore/features/lyrics/usecases/lookup.py"),
    Path("src/lyricstore/features/lyrics/usecases/save.py"),
    Path("src/lyricstore/features/lyrics/usecases/local_source.py"),
    Path("src/lyricstore/shared/cancellation.py"),
    Path("tests/features/lyrics/usecases/test_lookup_lyrics.py"),
    Path("tests/features/lyrics/usecases/test_save_lyrics.py"),
)


@pytest.mark.parametrize("module_path", TARGET_MODULES, ids=lambda path: str(path))
def test_module_headers_follow_summary_why_schema(module_path: Path) -> None:
    """Ensure module header docstring uses Summary and Why lines."""

    content_lines = (REPO_ROOT / module_path).read_text(encoding="utf-8").splitlines()
    start_index = next(
        (index for index, line in enumerate(content_lines) if line.strip()),
        None,
    )
    assert start_index is not None, f"{module_path} must not be empty"

    assert len(content_lines) >= start_index + HEADER_LENGTH, (
        f"{module_path} must provide at least {HEADER_LENGTH} header lines"
    )

    opening_line = content_lines[start_index].strip()
    summary_line = content_lines[start_index + SUMMARY_OFFSET]
    why_line = content_lines[start_index + WHY_OFFSET]
    closing_line = content_lines[start_index + CLOSE_OFFSET].strip()

    assert opening_line == HEADER_OPEN, f"{module_path} must start with header docstring"
    assert summary_line.startswith(SUMMARY_PREFIX), (
        f"{module_path} summary line must begin with '{SUMMARY_PREFIX}'"
    )
    assert why_line.startswith(WHY_PREFIX), (
        f"{module_path} why line must begin with '{WHY_PREFIX}'"
    )
    assert closing_line == HEADER_CLOSE, (
        f"{module_path} header must close with triple quotes"
    )
    assert summary_line.removeprefix(SUMMARY_PREFIX).strip(), (
        f"{module_path} summary text cannot be empty"
    )
    assert why_line.removeprefix(WHY_PREFIX).strip(), (
        f"{module_path} why text cannot be empty"
    )
