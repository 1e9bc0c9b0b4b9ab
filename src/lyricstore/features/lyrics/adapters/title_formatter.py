"""
Summary: Placeholder title formatter for TrackMetadata handles.
Why: Let the lyric source run stand-alone when no host formatting engine is injected.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import ClassVar, final

from lyricstore.features.lyrics.domain.errors import TemplateCompileError
from lyricstore.features.lyrics.usecases.ports import (
    FormatScript,
    TitleEvaluation,
    TitleFormatterPort,
)

MISSING_FIELD_TEXT = "?"


@dataclass(frozen=True, slots=True)
class _Literal:
    text: str


@dataclass(frozen=True, slots=True)
class _Field:
    name: str


@dataclass(frozen=True, slots=True)
class _Optional:
    nodes: tuple["_Node", ...]


_Node = _Literal | _Field | _Optional


@dataclass(frozen=True, slots=True)
class CompiledTemplate:
    """Parsed template; immutable and safe to share between threads."""

    template: str
    nodes: tuple[_Node, ...]


def _number(value: object, width: int = 1) -> str | None:
    if isinstance(value, int) and value > 0:
        return str(value).zfill(width)
    return None


def _text(value: object) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@final
class PlaceholderTitleFormatter(TitleFormatterPort):
    """Render ``%field%`` placeholders and ``[...]`` optional sections.

    A section in square brackets disappears when any field inside it is
    empty. A missing field outside such a section renders as ``?`` and
    marks the evaluation as failed.
    """

    FIELDS: ClassVar[dict[str, Callable[[object], str | None]]] = {
        "title": lambda t: _text(getattr(t, "title", None)),
        "artist": lambda t: _text(getattr(t, "artist", None)),
        "album": lambda t: _text(getattr(t, "album", None)),
        "album artist": lambda t: _text(getattr(t, "album_artist", None))
        or _text(getattr(t, "artist", None)),
        "genre": lambda t: _text(getattr(t, "genre", None)),
        "date": lambda t: _number(getattr(t, "year", None)),
        "year": lambda t: _number(getattr(t, "year", None)),
        "tracknumber": lambda t: _number(getattr(t, "track_number", None), 2),
        "totaltracks": lambda t: _number(getattr(t, "track_total", None)),
        "discnumber": lambda t: _number(getattr(t, "disc_number", None)),
        "totaldiscs": lambda t: _number(getattr(t, "disc_total", None)),
    }

    def compile(self, template: str) -> FormatScript:
        stack: list[list[_Node]] = [[]]
        literal: list[str] = []
        index = 0

        def flush_literal() -> None:
            if literal:
                stack[-1].append(_Literal("".join(literal)))
                literal.clear()

        while index < len(template):
            char = template[index]
            if char == "%":
                end = template.find("%", index + 1)
                if end == -1:
                    raise TemplateCompileError(template, f"unterminated field at offset {index}")
                name = template[index + 1 : end].strip().lower()
                if name not in self.FIELDS:
                    raise TemplateCompileError(template, f"unknown field %{name}%")
                flush_literal()
                stack[-1].append(_Field(name))
                index = end + 1
                continue
            if char == "[":
                flush_literal()
                stack.append([])
            elif char == "]":
                if len(stack) == 1:
                    raise TemplateCompileError(template, f"unmatched ']' at offset {index}")
                flush_literal()
                group = stack.pop()
                stack[-1].append(_Optional(tuple(group)))
            else:
                literal.append(char)
            index += 1

        if len(stack) != 1:
            raise TemplateCompileError(template, "unclosed '['")
        flush_literal()
        return CompiledTemplate(template=template, nodes=tuple(stack[0]))

    def evaluate(self, script: FormatScript, track: object) -> TitleEvaluation:
        if not isinstance(script, CompiledTemplate):
            raise TypeError(f"Expected a CompiledTemplate, got {type(script).__name__}")
        text, complete = self._render(script.nodes, track, optional=False)
        return TitleEvaluation(text=text, success=complete)

    def _render(
        self,
        nodes: tuple[_Node, ...],
        track: object,
        *,
        optional: bool,
    ) -> tuple[str, bool]:
        parts: list[str] = []
        complete = True
        for node in nodes:
            if isinstance(node, _Literal):
                parts.append(node.text)
            elif isinstance(node, _Field):
                value = self.FIELDS[node.name](track)
                if value is None:
                    if optional:
                        return "", False
                    complete = False
                    value = MISSING_FIELD_TEXT
                parts.append(value)
            else:
                section, section_complete = self._render(node.nodes, track, optional=True)
                if section_complete:
                    parts.append(section)
        return "".join(parts), complete


__all__ = ["CompiledTemplate", "MISSING_FIELD_TEXT", "PlaceholderTitleFormatter"]
