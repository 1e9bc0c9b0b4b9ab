"""
Summary: Exercise filename sanitization presets and their edge cases.
Why: Lyric file names must be valid and stable on every supported filesystem.
"""

from __future__ import annotations

import pytest

from lyricstore.features.lyrics.domain import (
    MACOS_RULES,
    POSIX_RULES,
    WINDOWS_RULES,
    FilenameRules,
    FilenameSanitizer,
    rules_for_platform,
)


@pytest.mark.parametrize(
    ("rules", "raw", "expected"),
    [
        (WINDOWS_RULES, 'AC/DC - What? "Live" <1979>', "AC_DC - What_ _Live_ _1979_"),
        (WINDOWS_RULES, "Trailing dots...", "Trailing dots"),
        (WINDOWS_RULES, "tab\there", "tab_here"),
        (POSIX_RULES, 'AC/DC - What? "Live"', 'AC_DC - What? "Live"'),
        (MACOS_RULES, "Time: 3/4", "Time_ 3_4"),
    ],
)
def test_sanitize_replaces_platform_illegal_characters(
    rules: FilenameRules, raw: str, expected: str
) -> None:
    """Each preset should only touch the characters its filesystem forbids."""

    assert FilenameSanitizer(rules).sanitize(raw) == expected


@pytest.mark.parametrize("raw", ["CON", "con", "LPT1", "nul.txt"])
def test_sanitize_guards_windows_reserved_names(raw: str) -> None:
    """Windows device names must never be produced verbatim."""

    sanitized = FilenameSanitizer(WINDOWS_RULES).sanitize(raw)

    assert sanitized == raw + "_"


@pytest.mark.parametrize("raw", ["", None, "   ", "..", "."])
def test_sanitize_never_returns_empty_or_dot_names(raw: str | None) -> None:
    """Degenerate titles still yield a usable single path component."""

    sanitized = FilenameSanitizer(POSIX_RULES).sanitize(raw)

    assert sanitized
    assert sanitized not in {".", ".."}


def test_sanitize_truncates_on_code_point_boundary() -> None:
    """Truncation must respect the byte limit without splitting characters."""

    rules = FilenameRules(name="tiny", illegal_characters=frozenset("/"), max_bytes=10)
    sanitized = FilenameSanitizer(rules).sanitize("歌歌歌歌歌")

    assert sanitized == "歌歌歌"
    assert len(sanitized.encode("utf-8")) <= 10


@pytest.mark.parametrize("rules", [WINDOWS_RULES, POSIX_RULES, MACOS_RULES])
def test_sanitize_is_idempotent(rules: FilenameRules) -> None:
    """Sanitizing an already sanitized title must not change it again."""

    sanitizer = FilenameSanitizer(rules)
    raw = ' Artist: "Name" / Title?* . '

    once = sanitizer.sanitize(raw)

    assert sanitizer.sanitize(once) == once


def test_sanitize_normalizes_unicode_composition() -> None:
    """Decomposed input should map to the same name as composed input."""

    sanitizer = FilenameSanitizer(POSIX_RULES)

    assert sanitizer.sanitize("Beyonce\u0301") == "Beyonc\u00e9"


def test_rules_for_platform_resolves_presets() -> None:
    """Named presets resolve directly and unknown names are rejected."""

    assert rules_for_platform("windows") is WINDOWS_RULES
    assert rules_for_platform("posix") is POSIX_RULES
    assert rules_for_platform("macos") is MACOS_RULES
    assert rules_for_platform("auto") in {WINDOWS_RULES, POSIX_RULES, MACOS_RULES}
    with pytest.raises(ValueError):
        _ = rules_for_platform("amiga")


def test_rules_reject_illegal_replacement() -> None:
    """A replacement that is itself illegal would defeat sanitization."""

    with pytest.raises(ValueError):
        _ = FilenameRules(name="bad", illegal_characters=frozenset("_"))
