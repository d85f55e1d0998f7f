"""PDF merge/compress feature package.

Re-exports the domain values and workflows used by the CLI layer.
"""

from cpdf.features.pdf.domain.models import (
    CANCELLED,
    Cancelled,
    CompressionProfile,
    CompressRequest,
    CompressResult,
    MergeRequest,
    MergeResult,
    Operation,
    OperationOutcome,
    SizeReport,
)
from cpdf.features.pdf.usecases.compress import CompressWorkflow
from cpdf.features.pdf.usecases.merge import MergeWorkflow
from cpdf.features.pdf.usecases.selection import SelectionWorkflow

__all__ = [
    "CANCELLED",
    "Cancelled",
    "CompressRequest",
    "CompressResult",
    "CompressWorkflow",
    "CompressionProfile",
    "MergeRequest",
    "MergeResult",
    "MergeWorkflow",
    "Operation",
    "OperationOutcome",
    "SelectionWorkflow",
    "SizeReport",
]
