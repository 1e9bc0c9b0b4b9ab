"""Tests for configuration path resolution helpers."""

from pathlib import Path

import pytest

from lyricstore.config.paths import (
    default_config_path,
    default_profile_dir,
    resolve_overridable_path,
)


def test_default_config_path(portable_repo_root: Path) -> None:
    assert default_config_path() == portable_repo_root / "config" / "config.toml"


def test_default_profile_dir_portable(portable_repo_root: Path) -> None:
    assert default_profile_dir() == portable_repo_root / ".profile"


def test_profile_dir_env_override(
    portable_repo_root: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """The environment variable should win over the portable default."""

    override = portable_repo_root / "elsewhere"
    monkeypatch.setenv("LYRICSTORE_PROFILE_DIR", str(override))

    assert default_profile_dir() == override


def test_explicit_path_wins(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=tmp_path / "explicit",
        env={"VAR": str(tmp_path / "env")},
        env_var="VAR",
        default_factory=lambda: tmp_path / "default",
    )

    assert resolved == tmp_path / "explicit"


def test_blank_env_value_falls_back_to_default(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=None,
        env={"VAR": "   "},
        env_var="VAR",
        default_factory=lambda: tmp_path / "default",
    )

    assert resolved == tmp_path / "default"
