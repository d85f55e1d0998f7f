"""
Summary: Build Ghostscript argument vectors for merge and compress requests.
Why: Pass file names as discrete arguments so no shell ever interprets them.
"""

from __future__ import annotations

from typing import Final

from cpdf.features.pdf.domain.models import CompressionProfile, CompressRequest, MergeRequest

DEFAULT_EXECUTABLE: Final[str] = "gs"
DEFAULT_COMPATIBILITY_LEVEL: Final[str] = "1.6"
DEFAULT_RENDERING_THREADS: Final[int] = 4


def _as_operand(name: str) -> str:
    """Keep a file name starting with ``-`` from being read as a switch."""

    return f"./{name}" if name.startswith("-") else name


def build_merge_argv(request: MergeRequest, executable: str = DEFAULT_EXECUTABLE) -> list[str]:
    """Build the merge invocation; inputs keep the order the user selected."""

    return [
        executable,
        "-q",
        "-dNOPAUSE",
        "-sDEVICE=pdfwrite",
        f"-sOutputFile={request.output}",
        *(_as_operand(name) for name in request.inputs),
    ]


def build_compress_argv(
    request: CompressRequest,
    executable: str = DEFAULT_EXECUTABLE,
    compatibility_level: str = DEFAULT_COMPATIBILITY_LEVEL,
    rendering_threads: int = DEFAULT_RENDERING_THREADS,
) -> list[str]:
    """Build the compress invocation.

    Raises:
        ValueError: If the request carries something other than a known profile.
    """
    if not isinstance(request.profile, CompressionProfile):
        raise ValueError(f"Unsupported compression profile: {request.profile!r}")

    return [
        executable,
        "-q",
        "-sDEVICE=pdfwrite",
        f"-dCompatibilityLevel={compatibility_level}",
        f"-dNumRenderingThreads={rendering_threads}",
        f"-dPDFSETTINGS=/{request.profile.value}",
        "-dNOPAUSE",
        "-dQUIET",
        "-dBATCH",
        f"-sOutputFile={request.output}",
        _as_operand(request.source),
        "-c",
        "quit",
    ]


__all__ = [
    "DEFAULT_COMPATIBILITY_LEVEL",
    "DEFAULT_EXECUTABLE",
    "DEFAULT_RENDERING_THREADS",
    "build_compress_argv",
    "build_merge_argv",
]
