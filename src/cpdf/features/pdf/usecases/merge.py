"""
Summary: Merge workflow from file selection to a single engine invocation.
Why: Keep the no-op outcomes of a merge apart from fatal engine failures.
"""

from __future__ import annotations

from typing import final

from cpdf.features.pdf.domain.models import (
    CANCELLED,
    MergeRequest,
    MergeResult,
    OperationOutcome,
)
from cpdf.platform.logging import logger

from .output_resolver import OutputResolver
from .ports import EnginePort, FileSystemPort, PromptPort
from .selection import SelectionWorkflow


@final
class MergeWorkflow:
    """Select inputs, resolve the output and merge them."""

    def __init__(
        self,
        prompts: PromptPort,
        filesystem: FileSystemPort,
        engine: EnginePort,
        *,
        default_output: str = "merged.pdf",
    ) -> None:
        self._filesystem = filesystem
        self._engine = engine
        self._selection = SelectionWorkflow(prompts)
        self._resolver = OutputResolver(prompts, filesystem)
        self._default_output = default_output

    def run(self) -> MergeResult:
        """Run one merge.

        Returns:
            MergeResult: ``COMPLETED`` with the executed request, or one of the
            no-op outcomes when nothing was handed to the engine.
        """
        candidates = self._filesystem.list_candidates()
        if not candidates:
            return MergeResult(OperationOutcome.NO_CANDIDATES)

        inputs = self._selection.choose_merge_inputs(candidates)
        if not inputs:
            return MergeResult(OperationOutcome.NO_INPUT)

        output = self._resolver.resolve(self._default_output, self._default_output)
        if output is CANCELLED:
            logger.debug("Merge cancelled at overwrite confirmation")
            return MergeResult(OperationOutcome.CANCELLED)

        request = MergeRequest(inputs=tuple(inputs), output=output)
        self._engine.merge(request)
        return MergeResult(OperationOutcome.COMPLETED, request)


__all__ = ["MergeWorkflow"]
