"""
Summary: Menu, file and profile selection over the prompt capability.
Why: Turn raw prompt answers into validated operations, files and profiles.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final, final

from cpdf.features.pdf.domain.models import CompressionProfile, Operation

from .ports import PromptPort

OPERATION_LABELS: Final[dict[str, Operation]] = {
    "Merge PDFs": Operation.MERGE,
    "Compress a PDF": Operation.COMPRESS,
    "Exit": Operation.EXIT,
}


@final
class SelectionWorkflow:
    """Collect user selections; prompt failures propagate to the caller."""

    def __init__(self, prompts: PromptPort) -> None:
        self._prompts = prompts

    def choose_operation(self) -> Operation:
        answer = self._prompts.select("What would you like to do?", list(OPERATION_LABELS))
        return OPERATION_LABELS.get(answer, Operation.INVALID)

    def choose_merge_inputs(self, candidates: Sequence[str]) -> list[str]:
        """Return the files to merge in the order the user picked them."""

        picked = self._prompts.multi_select("Select the PDFs to merge", candidates)
        allowed = set(candidates)
        return [name for name in picked if name in allowed]

    def choose_compress_input(self, candidates: Sequence[str]) -> str:
        answer = self._prompts.select("Select the PDF to compress", candidates)
        if answer not in candidates:
            raise ValueError(f"'{answer}' is not one of the listed PDF files")
        return answer

    def choose_compression_profile(self) -> CompressionProfile:
        answer = self._prompts.select(
            "Select a compression profile",
            [profile.value for profile in CompressionProfile],
        )
        return CompressionProfile.from_user_input(answer)


__all__ = ["OPERATION_LABELS", "SelectionWorkflow"]
