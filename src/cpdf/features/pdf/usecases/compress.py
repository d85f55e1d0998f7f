"""
Summary: Compress workflow ending in a before/after size report.
Why: Measure sizes around exactly one engine invocation per request.
"""

from __future__ import annotations

from typing import Final, final

from cpdf.features.pdf.domain.models import (
    CANCELLED,
    CompressRequest,
    CompressResult,
    OperationOutcome,
    SizeReport,
)
from cpdf.platform.logging import logger

from .output_resolver import PDF_SUFFIX, OutputResolver
from .ports import EnginePort, FileSystemPort, PromptPort
from .selection import SelectionWorkflow

COMPRESSED_SUFFIX: Final[str] = ".compressed.pdf"
COMPRESSED_DISPLAY_NAME: Final[str] = "<original name>" + COMPRESSED_SUFFIX


def default_compressed_name(source: str) -> str:
    """``report.pdf`` -> ``report.compressed.pdf``."""

    return source.removesuffix(PDF_SUFFIX) + COMPRESSED_SUFFIX


@final
class CompressWorkflow:
    """Select a file, resolve the output, pick a profile and compress."""

    def __init__(
        self,
        prompts: PromptPort,
        filesystem: FileSystemPort,
        engine: EnginePort,
    ) -> None:
        self._filesystem = filesystem
        self._engine = engine
        self._selection = SelectionWorkflow(prompts)
        self._resolver = OutputResolver(prompts, filesystem)

    def run(self) -> CompressResult:
        """Run one compression.

        Returns:
            CompressResult: ``COMPLETED`` with the request and size report, or a
            no-op outcome when the engine was not invoked.
        """
        candidates = self._filesystem.list_candidates()
        if not candidates:
            return CompressResult(OperationOutcome.NO_CANDIDATES)

        source = self._selection.choose_compress_input(candidates)
        output = self._resolver.resolve(COMPRESSED_DISPLAY_NAME, default_compressed_name(source))
        if output is CANCELLED:
            logger.debug("Compression of %s cancelled at overwrite confirmation", source)
            return CompressResult(OperationOutcome.CANCELLED)

        profile = self._selection.choose_compression_profile()
        request = CompressRequest(source=source, output=output, profile=profile)

        before = self._filesystem.file_size(source)
        self._engine.compress(request)
        after = self._filesystem.file_size(output)

        return CompressResult(
            OperationOutcome.COMPLETED,
            request,
            SizeReport(source=source, before=before, after=after),
        )


__all__ = ["COMPRESSED_SUFFIX", "CompressWorkflow", "default_compressed_name"]
