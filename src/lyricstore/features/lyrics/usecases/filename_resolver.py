"""
Summary: Resolve the sanitized base file name for a track's lyric file.
Why: Lookups and saves must agree on one deterministic name per track.
"""

from __future__ import annotations

from lyricstore.features.lyrics.domain.errors import TitleFormatError
from lyricstore.features.lyrics.domain.sanitizer import FilenameSanitizer

from .ports import TitleFormatterPort


def resolve_file_title(
    track: object,
    template: str,
    *,
    formatter: TitleFormatterPort,
    sanitizer: FilenameSanitizer,
) -> str:
    """Compile ``template``, evaluate it for ``track`` and sanitize the result.

    Args:
        track: Host track handle, passed through to ``formatter`` untouched.
        template: Filename format template from configuration.
        formatter: Title-formatting engine.
        sanitizer: Filename rules of the target filesystem.

    Returns:
        str: Base file name without directory or extension.

    Raises:
        TemplateCompileError: If ``template`` does not compile.
        TitleFormatError: If evaluation fails; ``partial_title`` carries the
            sanitized partial output.
    """
    script = formatter.compile(template)
    evaluation = formatter.evaluate(script, track)
    title = sanitizer.sanitize(evaluation.text)
    if not evaluation.success:
        raise TitleFormatError(
            f"Failed to format file title from {template!r}",
            partial_title=title,
        )
    return title


__all__ = ["resolve_file_title"]
