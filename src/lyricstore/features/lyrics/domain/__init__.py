"""
Summary: Domain layer of the lyrics feature.
Why: Group pure value types, errors and sanitization rules without I/O.
"""

from __future__ import annotations

from .errors import (
    CrossDomainMoveError,
    DirectoryCreateError,
    LyricSourceError,
    OperationCancelledError,
    TemplateCompileError,
    TitleError,
    TitleFormatError,
    WriteError,
)
from .models import (
    LYRICS_DIR_NAME,
    PLAIN_EXTENSION,
    TIMESTAMPED_EXTENSION,
    LyricExtensions,
    LyricRecord,
    lyrics_directory,
)
from .sanitizer import (
    MACOS_RULES,
    POSIX_RULES,
    WINDOWS_RULES,
    FilenameRules,
    FilenameSanitizer,
    rules_for_platform,
)

__all__ = [
    "CrossDomainMoveError",
    "DirectoryCreateError",
    "FilenameRules",
    "FilenameSanitizer",
    "LYRICS_DIR_NAME",
    "LyricExtensions",
    "LyricRecord",
    "LyricSourceError",
    "MACOS_RULES",
    "OperationCancelledError",
    "PLAIN_EXTENSION",
    "POSIX_RULES",
    "TIMESTAMPED_EXTENSION",
    "TemplateCompileError",
    "TitleError",
    "TitleFormatError",
    "WINDOWS_RULES",
    "WriteError",
    "lyrics_directory",
    "rules_for_platform",
]
