"""
Summary: Check placeholder compilation and evaluation against TrackMetadata.
Why: The bundled formatter names every lyric file when no host engine is injected.
"""

from __future__ import annotations

import pytest

from lyricstore.features.lyrics.adapters import PlaceholderTitleFormatter
from lyricstore.features.lyrics.domain import TemplateCompileError
from lyricstore.shared import TrackMetadata


@pytest.fixture()
def formatter() -> PlaceholderTitleFormatter:
    return PlaceholderTitleFormatter()


def test_evaluate_renders_fields(formatter: PlaceholderTitleFormatter) -> None:
    track = TrackMetadata(title="Halo", artist="Beyoncé", track_number=3)
    script = formatter.compile("%tracknumber%. %artist% - %title%")

    evaluation = formatter.evaluate(script, track)

    assert evaluation.success is True
    assert evaluation.text == "03. Beyoncé - Halo"


def test_optional_section_disappears_when_field_missing(
    formatter: PlaceholderTitleFormatter,
) -> None:
    script = formatter.compile("[%artist% - ]%title%")

    with_artist = formatter.evaluate(script, TrackMetadata(title="Song", artist="Band"))
    without_artist = formatter.evaluate(script, TrackMetadata(title="Song"))

    assert with_artist.text == "Band - Song"
    assert without_artist.text == "Song"
    assert without_artist.success is True


def test_missing_required_field_reports_failure_with_partial_text(
    formatter: PlaceholderTitleFormatter,
) -> None:
    script = formatter.compile("%artist% - %title%")

    evaluation = formatter.evaluate(script, TrackMetadata(title="Song"))

    assert evaluation.success is False
    assert evaluation.text == "? - Song"


def test_album_artist_falls_back_to_artist(formatter: PlaceholderTitleFormatter) -> None:
    script = formatter.compile("%album artist%")

    evaluation = formatter.evaluate(script, TrackMetadata(artist="Solo"))

    assert evaluation.text == "Solo"


@pytest.mark.parametrize(
    "template",
    ["%title", "%nosuchfield%", "[%title%", "%title%]", "%%"],
)
def test_compile_rejects_invalid_templates(
    formatter: PlaceholderTitleFormatter, template: str
) -> None:
    with pytest.raises(TemplateCompileError) as excinfo:
        _ = formatter.compile(template)

    assert excinfo.value.template == template


def test_compile_is_deterministic(formatter: PlaceholderTitleFormatter) -> None:
    assert formatter.compile("[%artist% - ]%title%") == formatter.compile("[%artist% - ]%title%")
