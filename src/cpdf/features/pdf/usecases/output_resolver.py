"""
Summary: Ask for an output file name and confirm before overwriting it.
Why: Return a cancellation sentinel instead of failing when the user backs out.
"""

from __future__ import annotations

from pathlib import Path
from typing import Final, final

from cpdf.features.pdf.domain.models import CANCELLED, OutputChoice

from .ports import FileSystemPort, PromptPort

PDF_SUFFIX: Final[str] = ".pdf"


@final
class OutputResolver:
    """Resolve the output path for a merge or compress run."""

    def __init__(self, prompts: PromptPort, filesystem: FileSystemPort) -> None:
        self._prompts = prompts
        self._filesystem = filesystem

    def resolve(self, default_display_name: str, default_path: str) -> OutputChoice:
        """Prompt for the output name.

        Args:
            default_display_name: Name shown in the prompt label.
            default_path: Value used when the answer is empty.

        Returns:
            The resolved path, or ``CANCELLED`` if the user refused to
            overwrite an existing file.
        """
        answer = self._prompts.text(
            f"Output file name (default: {default_display_name})",
            default=default_path,
        )

        if answer == "":
            output = default_path
        elif not answer.endswith(PDF_SUFFIX):
            output = answer + PDF_SUFFIX
        else:
            output = answer

        path = Path(output)
        if self._filesystem.exists(path):
            overwrite = self._prompts.confirm(
                f"{output} already exists. Overwrite it?"
            )
            if not overwrite:
                return CANCELLED

        return path


__all__ = ["OutputResolver", "PDF_SUFFIX"]
