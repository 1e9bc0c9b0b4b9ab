"""
Summary: Concrete adapters for the lyrics feature ports.
Why: Keep local disk and formatting implementations swappable by hosts and tests.
"""

from __future__ import annotations

from .filesystem_adapter import LocalLyricsFilesystem
from .title_formatter import CompiledTemplate, PlaceholderTitleFormatter

__all__ = ["CompiledTemplate", "LocalLyricsFilesystem", "PlaceholderTitleFormatter"]
