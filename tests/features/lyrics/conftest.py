"""
Summary: Shared fixtures for lyrics feature tests.
Why: Provide deterministic formatter stubs and an isolated profile directory.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pytest

from lyricstore.features.lyrics.adapters import LocalLyricsFilesystem
from lyricstore.features.lyrics.domain import (
    POSIX_RULES,
    FilenameSanitizer,
    LyricExtensions,
    TemplateCompileError,
)
from lyricstore.features.lyrics.usecases import (
    FormatScript,
    LocalFileLyricSource,
    TitleEvaluation,
)
from lyricstore.shared import CancellationToken


@dataclass(frozen=True)
class StubScript:
    template: str


@dataclass(frozen=True)
class StubTrack:
    """Track handle whose formatted title is fixed up front."""

    title: str
    formattable: bool = True


class StubFormatter:
    """Formatter returning the track's preset title; ``!`` templates fail to compile."""

    def __init__(self) -> None:
        self.compiled: list[str] = []

    def compile(self, template: str) -> FormatScript:
        self.compiled.append(template)
        if template.startswith("!"):
            raise TemplateCompileError(template, "stub rejects templates starting with '!'")
        return StubScript(template)

    def evaluate(self, script: FormatScript, track: object) -> TitleEvaluation:
        assert isinstance(script, StubScript)
        assert isinstance(track, StubTrack)
        return TitleEvaluation(text=track.title, success=track.formattable)


@pytest.fixture()
def formatter() -> StubFormatter:
    return StubFormatter()


@pytest.fixture()
def sanitizer() -> FilenameSanitizer:
    return FilenameSanitizer(POSIX_RULES)


@pytest.fixture()
def cancel() -> CancellationToken:
    return CancellationToken()


@pytest.fixture()
def profile_dir(tmp_path: Path) -> Path:
    profile = tmp_path / "profile"
    profile.mkdir()
    return profile


@pytest.fixture()
def lyrics_dir(profile_dir: Path) -> Path:
    return profile_dir / "lyrics"


@pytest.fixture()
def filesystem() -> LocalLyricsFilesystem:
    return LocalLyricsFilesystem()


@pytest.fixture()
def source(
    formatter: StubFormatter,
    filesystem: LocalLyricsFilesystem,
    sanitizer: FilenameSanitizer,
    profile_dir: Path,
) -> LocalFileLyricSource:
    return LocalFileLyricSource(
        formatter=formatter,
        filesystem=filesystem,
        template_provider=lambda: "%title%",
        profile_dir_provider=lambda: profile_dir,
        sanitizer=sanitizer,
        extensions=LyricExtensions(),
    )


@pytest.fixture()
def make_track() -> type[StubTrack]:
    return StubTrack
