"""Configuration management for lyricstore."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from lyricstore.config.file_ops import write_text_file
from lyricstore.config.paths import default_config_path, default_profile_dir
from lyricstore.platform.logging import logger


DEFAULT_FILENAME_FORMAT = "[%artist% - ]%title%"
DEFAULT_LYRIC_EXTENSIONS: tuple[str, ...] = (".lrc", ".txt")
FILENAME_RULE_CHOICES: tuple[str, ...] = ("auto", "windows", "posix", "macos")


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Profile directory holding the ``lyrics`` folder
    profile_dir: Path | None = _path_field()

    # Log file path
    log_file: Path | None = _path_field()

    # Title format used to name lyric files
    filename_format: str = DEFAULT_FILENAME_FORMAT

    # Candidate extensions in lookup priority order
    lyric_extensions: list[str] = field(default_factory=lambda: list(DEFAULT_LYRIC_EXTENSIONS))

    # Which filesystem's filename constraints to enforce
    filename_rules: str = "auto"

    # Temp area for saves; unset means the lyrics directory itself
    temp_dir: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects and validate choices.

        Only fields flagged with ``metadata={"path": True}`` by ``_path_field``
        are converted.
        """
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        if self.filename_rules not in FILENAME_RULE_CHOICES:
            raise ValueError(
                f"filename_rules must be one of {', '.join(FILENAME_RULE_CHOICES)}, "
                f"got {self.filename_rules!r}"
            )
        if not self.filename_format.strip():
            raise ValueError("filename_format must not be empty")
        self.lyric_extensions = [str(ext) for ext in self.lyric_extensions]

    def resolved_profile_dir(self) -> Path:
        """Return the configured profile directory or the portable default."""

        if self.profile_dir is not None:
            return self.profile_dir.expanduser().resolve()
        return default_profile_dir()

    def save(self, path: Path | None = None) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = path or default_config_path()
            content = self._render_toml(config_dict)
            write_text_file(target, content)
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# lyricstore Configuration File")
        lines.append("")

        lines.append("# Profile directory (optional)")
        lines.append("# Lyrics are stored under <profile_dir>/lyrics")
        lines.append('# Example: profile_dir = "/path/to/profile"')
        if config["profile_dir"] is not None:
            lines.append(f"profile_dir = {self._format_toml_value(config['profile_dir'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/lyricstore.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# File name format for lyric files")
        lines.append("# %field% placeholders; [...] sections vanish when a field is empty")
        lines.append(f"filename_format = {self._format_toml_value(config['filename_format'])}")
        lines.append("")

        lines.append("# Candidate extensions, highest priority first")
        lines.append(f"lyric_extensions = {self._format_toml_value(config['lyric_extensions'])}")
        lines.append("")

        lines.append("# Filename rules: auto, windows, posix or macos")
        lines.append(f"filename_rules = {self._format_toml_value(config['filename_rules'])}")
        lines.append("")

        lines.append("# Temporary directory for saves (optional)")
        lines.append("# Leave unset to stage saves next to the destination file")
        if config["temp_dir"] is not None:
            lines.append(f"temp_dir = {self._format_toml_value(config['temp_dir'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (list, tuple)):
            return "[" + ", ".join(self._format_toml_value(item) for item in value) + "]"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file.

        Args:
            path: Config file to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.
        """
        config_file = path or default_config_path()

        if cls._instance is not None and cls._loaded_from == config_file:
            return cls._instance

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
                config_dict = {key: value for key, value in config_dict.items() if key in known}

                logger.info("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)
            else:
                instance = cls()
                instance.save(config_file)
                logger.info("Created default configuration at %s", config_file)

            cls._instance = instance
            cls._loaded_from = config_file
            return instance

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` rereads the file."""

        cls._instance = None
        cls._loaded_from = None


__all__ = [
    "Config",
    "DEFAULT_FILENAME_FORMAT",
    "DEFAULT_LYRIC_EXTENSIONS",
    "FILENAME_RULE_CHOICES",
]
