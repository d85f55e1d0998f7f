"""Filesystem adapter used to discover candidate PDFs and measure outputs."""

from __future__ import annotations

import fnmatch
import os
from pathlib import Path
from typing import Final, final

PDF_PATTERN: Final[str] = "*.pdf"


def list_candidates(directory: Path | None = None) -> list[str]:
    """List names of files matching ``*.pdf`` in ``directory``.

    Args:
        directory: Directory to scan. Defaults to the current working directory.

    Returns:
        list[str]: Matching file names in the order the filesystem yields them.

    Raises:
        OSError: If the directory cannot be read.
    """
    root = directory if directory is not None else Path.cwd()
    with os.scandir(root) as entries:
        return [
            entry.name
            for entry in entries
            if entry.is_file() and fnmatch.fnmatchcase(entry.name, PDF_PATTERN)
        ]


def file_size(path: Path | str) -> int:
    """Return the size of ``path`` in bytes."""

    return Path(path).stat().st_size


@final
class LocalFileSystem:
    """Working-directory filesystem adapter for the PDF workflows."""

    def list_candidates(self) -> list[str]:
        """Return PDF names in the current working directory."""
        return list_candidates()

    def exists(self, path: Path) -> bool:
        return path.exists()

    def file_size(self, path: Path | str) -> int:
        return file_size(path)


__all__ = ["LocalFileSystem", "PDF_PATTERN", "file_size", "list_candidates"]
