"""
Summary: Exception hierarchy for fatal cpdf failures.
Why: Let the CLI entry point tell engine, prompt and config failures apart.
"""

from __future__ import annotations

from collections.abc import Sequence


class CpdfError(Exception):
    """Base class for errors that abort the current session."""


class ConfigError(CpdfError):
    """Raised when the configuration file cannot be read or is invalid."""


class PromptAbortedError(CpdfError):
    """Raised when an interactive prompt reaches end of input."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Input closed while waiting for: {message}")
        self.prompt_message = message


class EngineError(CpdfError):
    """Base class for Ghostscript invocation failures."""

    def __init__(self, message: str, argv: Sequence[str]) -> None:
        super().__init__(message)
        self.argv = tuple(argv)


class EngineNotFoundError(EngineError):
    """Raised when the Ghostscript executable cannot be launched."""


class EngineFailedError(EngineError):
    """Raised when Ghostscript exits with a non-zero status."""

    def __init__(self, message: str, argv: Sequence[str], returncode: int) -> None:
        super().__init__(message, argv)
        self.returncode = returncode


__all__ = [
    "ConfigError",
    "CpdfError",
    "EngineError",
    "EngineFailedError",
    "EngineNotFoundError",
    "PromptAbortedError",
]
