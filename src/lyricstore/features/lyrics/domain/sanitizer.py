"""
Summary: Filename sanitization with per-filesystem rule presets.
Why: Resolved titles must be valid file names on whichever filesystem stores them.
"""

from __future__ import annotations

import sys
import unicodedata
from dataclasses import dataclass, field
from typing import ClassVar, final

from lyricstore.platform.logging import logger


@dataclass(frozen=True, slots=True)
class FilenameRules:
    """Filename constraints of one target filesystem."""

    name: str
    illegal_characters: frozenset[str]
    forbid_control_characters: bool = False
    reserved_names: frozenset[str] = field(default_factory=frozenset)
    trailing_strip: str = ""
    replacement: str = "_"
    max_bytes: int = 200

    def __post_init__(self) -> None:
        if len(self.replacement) != 1 or self.replacement in self.illegal_characters:
            raise ValueError(f"Replacement must be one legal character, got {self.replacement!r}")
        if self.max_bytes < 1:
            raise ValueError("max_bytes must be positive")


_WINDOWS_RESERVED = frozenset(
    {"CON", "PRN", "AUX", "NUL"}
    | {f"COM{i}" for i in range(1, 10)}
    | {f"LPT{i}" for i in range(1, 10)}
)

WINDOWS_RULES = FilenameRules(
    name="windows",
    illegal_characters=frozenset('<>:"/\\|?*\x00'),
    forbid_control_characters=True,
    reserved_names=_WINDOWS_RESERVED,
    trailing_strip=". ",
)

POSIX_RULES = FilenameRules(
    name="posix",
    illegal_characters=frozenset("/\x00"),
)

MACOS_RULES = FilenameRules(
    name="macos",
    illegal_characters=frozenset("/:\x00"),
)

_PRESETS: dict[str, FilenameRules] = {
    rules.name: rules for rules in (WINDOWS_RULES, POSIX_RULES, MACOS_RULES)
}


def rules_for_platform(name: str = "auto") -> FilenameRules:
    """Return the rule preset for ``name``; ``auto`` picks the running platform.

    Raises:
        ValueError: If ``name`` is not a known preset.
    """
    if name == "auto":
        if sys.platform.startswith("win"):
            return WINDOWS_RULES
        if sys.platform == "darwin":
            return MACOS_RULES
        return POSIX_RULES
    try:
        return _PRESETS[name]
    except KeyError:
        raise ValueError(f"Unknown filename rules preset: {name!r}") from None


@final
class FilenameSanitizer:
    """Turn an arbitrary title into a single safe path component."""

    _DOT_NAMES: ClassVar[frozenset[str]] = frozenset({".", ".."})

    def __init__(self, rules: FilenameRules | None = None) -> None:
        self.rules = rules or rules_for_platform()

    def _is_illegal(self, char: str) -> bool:
        if char in self.rules.illegal_characters:
            return True
        return self.rules.forbid_control_characters and unicodedata.category(char) == "Cc"

    def _truncate(self, text: str) -> str:
        """Cut ``text`` to the byte limit without splitting a code point."""

        encoded = text.encode("utf-8")
        if len(encoded) <= self.rules.max_bytes:
            return text
        return encoded[: self.rules.max_bytes].decode("utf-8", errors="ignore")

    def _strip(self, text: str) -> str:
        text = text.strip()
        if self.rules.trailing_strip:
            text = text.rstrip(self.rules.trailing_strip)
        return text

    def sanitize(self, text: str | None) -> str:
        """Sanitize ``text`` for use as a file name without extension.

        Rules applied, in order:
        1. Normalize using NFC
        2. Replace illegal characters with the rule's replacement
        3. Strip surrounding whitespace and platform-forbidden trailing characters
        4. Truncate to the byte limit
        5. Suffix reserved device names and dot names with the replacement

        Args:
            text: Raw title produced by the formatter.

        Returns:
            str: Non-empty, idempotently sanitized file name.
        """
        if not text:
            return self.rules.replacement

        try:
            text = unicodedata.normalize("NFC", text)
            text = "".join(
                self.rules.replacement if self._is_illegal(char) else char for char in text
            )
            text = self._strip(self._truncate(self._strip(text)))

            stem = text.split(".", 1)[0].upper()
            if text in self._DOT_NAMES or stem in self.rules.reserved_names:
                text = text + self.rules.replacement

            return text or self.rules.replacement

        except Exception as e:
            logger.error("Failed to sanitize file title '%s': %s", text, e)
            raise


__all__ = [
    "FilenameRules",
    "FilenameSanitizer",
    "MACOS_RULES",
    "POSIX_RULES",
    "WINDOWS_RULES",
    "rules_for_platform",
]
