"""Configuration management for cpdf."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from cpdf.config.file_ops import write_text_file
from cpdf.config.paths import default_config_path
from cpdf.exceptions import ConfigError
from cpdf.platform.logging import logger

GS_EXECUTABLE_DEFAULT: Final[str] = "gs"
COMPATIBILITY_LEVEL_DEFAULT: Final[str] = "1.6"
RENDERING_THREADS_DEFAULT: Final[int] = 4
MERGE_OUTPUT_DEFAULT: Final[str] = "merged.pdf"


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

    # Ghostscript settings
    gs_executable: str = GS_EXECUTABLE_DEFAULT
    compatibility_level: str = COMPATIBILITY_LEVEL_DEFAULT
    rendering_threads: int = RENDERING_THREADS_DEFAULT

    # Suggested output name for merges
    default_merge_output: str = MERGE_OUTPUT_DEFAULT

    # Leave a partially written output behind when Ghostscript fails
    keep_partial_output: bool = False

    # Log file path
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects and validate values.

        Raises:
            ConfigError: If a value is outside its accepted range.
        """
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

        # TOML users tend to write the level unquoted (1.6)
        if isinstance(self.compatibility_level, (int, float)) and not isinstance(
            self.compatibility_level, bool
        ):
            self.compatibility_level = str(self.compatibility_level)

        if (
            isinstance(self.rendering_threads, bool)
            or not isinstance(self.rendering_threads, int)
            or self.rendering_threads <= 0
        ):
            raise ConfigError(
                f"rendering_threads must be a positive integer, got {self.rendering_threads!r}"
            )
        for name in ("gs_executable", "compatibility_level", "default_merge_output"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ConfigError(f"{name} must be a non-empty string")
        if not isinstance(self.keep_partial_output, bool):
            raise ConfigError("keep_partial_output must be true or false")

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            write_text_file(target, self._render_toml(config_dict))
            logger.debug("Configuration saved to %s", target)
        except OSError as e:
            logger.debug("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# cpdf Configuration File")
        lines.append("")

        lines.append("# Ghostscript executable name or absolute path")
        lines.append(f"gs_executable = {self._format_toml_value(config['gs_executable'])}")
        lines.append("")

        lines.append("# PDF compatibility level passed to Ghostscript when compressing")
        lines.append(
            f"compatibility_level = {self._format_toml_value(config['compatibility_level'])}"
        )
        lines.append("")

        lines.append("# Number of rendering threads Ghostscript may use when compressing")
        lines.append(
            f"rendering_threads = {self._format_toml_value(config['rendering_threads'])}"
        )
        lines.append("")

        lines.append("# File name suggested for merged output")
        lines.append(
            f"default_merge_output = {self._format_toml_value(config['default_merge_output'])}"
        )
        lines.append("")

        lines.append("# Keep the output file when Ghostscript fails part way (default false)")
        lines.append(
            f"keep_partial_output = {self._format_toml_value(config['keep_partial_output'])}"
        )
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/cpdf.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
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
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file, writing defaults when it is missing.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: If the file is not valid TOML or holds unknown keys.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        if not config_file.exists():
            config = cls()
            try:
                config.save()
            except OSError as e:
                logger.warning("Using built-in defaults; cannot write %s: %s", config_file, e)
            else:
                logger.debug("Created default configuration at %s", config_file)
            cls._instance = config
            return config

        try:
            with open(config_file, "rb") as f:
                config_dict = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid configuration file {config_file}: {e}") from e

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            raise ConfigError(
                f"Unknown configuration keys in {config_file}: {', '.join(unknown)}"
            )

        try:
            instance = cls(**config_dict)
        except TypeError as e:
            raise ConfigError(f"Invalid configuration file {config_file}: {e}") from e

        logger.debug("Configuration loaded from %s", config_file)
        cls._instance = instance
        return instance


__all__ = [
    "COMPATIBILITY_LEVEL_DEFAULT",
    "Config",
    "GS_EXECUTABLE_DEFAULT",
    "MERGE_OUTPUT_DEFAULT",
    "RENDERING_THREADS_DEFAULT",
]
