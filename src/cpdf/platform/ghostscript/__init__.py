"""Ghostscript command construction and invocation."""

from cpdf.platform.ghostscript.commands import build_compress_argv, build_merge_argv
from cpdf.platform.ghostscript.runner import GhostscriptRunner

__all__ = ["GhostscriptRunner", "build_compress_argv", "build_merge_argv"]
