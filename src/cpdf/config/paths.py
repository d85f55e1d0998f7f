"""Shared path utilities for configuration and data locations.

This module centralizes how the application discovers locations for
config and log files.

Policy:
- Config: ``$CPDF_CONFIG_DIR/config.toml``, defaulting to
  ``~/.config/cpdf/config.toml``.
- Data (logs): ``$CPDF_DATA_DIR``, defaulting to ``~/.local/state/cpdf``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


_ENV_CONFIG_DIR: Final[str] = "CPDF_CONFIG_DIR"
_ENV_DATA_DIR: Final[str] = "CPDF_DATA_DIR"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def default_config_dir() -> Path:
    """Get the directory holding ``config.toml``."""

    return resolve_overridable_path(
        explicit_path=None,
        env=None,
        env_var=_ENV_CONFIG_DIR,
        default_factory=lambda: Path.home() / ".config" / "cpdf",
    )


def default_config_path() -> Path:
    """Get the default path to the main TOML config file."""

    return default_config_dir() / "config.toml"


def default_data_dir() -> Path:
    """Get the default directory for app data such as log files."""

    return resolve_overridable_path(
        explicit_path=None,
        env=None,
        env_var=_ENV_DATA_DIR,
        default_factory=lambda: Path.home() / ".local" / "state" / "cpdf",
    )


def default_log_file() -> Path:
    """Get the default log file path."""

    return default_data_dir() / "cpdf.log"


__all__ = [
    "default_config_dir",
    "default_config_path",
    "default_data_dir",
    "default_log_file",
    "resolve_overridable_path",
]
