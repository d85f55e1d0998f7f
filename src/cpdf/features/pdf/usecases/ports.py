"""
Summary: Protocols for the prompt, filesystem and engine collaborators.
Why: Keep workflows testable without a terminal or a Ghostscript install.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from cpdf.features.pdf.domain.models import CompressRequest, MergeRequest


class PromptPort(Protocol):
    """Interactive prompt capability."""

    def select(self, message: str, options: Sequence[str]) -> str:
        """Return exactly one of ``options``."""
        ...

    def multi_select(self, message: str, options: Sequence[str]) -> list[str]:
        """Return a subset of ``options`` in the order they were picked."""
        ...

    def text(self, message: str, default: str) -> str:
        """Return free text, pre-filled with ``default``."""
        ...

    def confirm(self, message: str) -> bool:
        """Return the answer to a yes/no question."""
        ...


class FileSystemPort(Protocol):
    """Read-only view of the working directory."""

    def list_candidates(self) -> list[str]:
        ...

    def exists(self, path: Path) -> bool:
        ...

    def file_size(self, path: Path | str) -> int:
        ...


class EnginePort(Protocol):
    """External document engine."""

    def merge(self, request: MergeRequest) -> None:
        ...

    def compress(self, request: CompressRequest) -> None:
        ...


__all__ = ["EnginePort", "FileSystemPort", "PromptPort"]
