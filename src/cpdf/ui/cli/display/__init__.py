"""Display management for CLI interface."""

from cpdf.ui.cli.display.result import ResultDisplay
from cpdf.ui.cli.display.version import VersionDisplay

__all__ = ["ResultDisplay", "VersionDisplay"]
