"""
Summary: Run Ghostscript once per request and surface failures as fatal errors.
Why: Centralize subprocess handling, logging and partial-output cleanup.
"""

from __future__ import annotations

import shlex
import subprocess
import time
from pathlib import Path
from typing import Any, final

from cpdf.exceptions import EngineFailedError, EngineNotFoundError
from cpdf.features.pdf.domain.models import CompressRequest, MergeRequest
from cpdf.platform.logging import logger

from .commands import (
    DEFAULT_COMPATIBILITY_LEVEL,
    DEFAULT_EXECUTABLE,
    DEFAULT_RENDERING_THREADS,
    build_compress_argv,
    build_merge_argv,
)


@final
class GhostscriptRunner:
    """Engine adapter that shells out to the ``gs`` executable."""

    executable: str
    compatibility_level: str
    rendering_threads: int
    keep_partial_output: bool

    def __init__(
        self,
        executable: str = DEFAULT_EXECUTABLE,
        *,
        compatibility_level: str = DEFAULT_COMPATIBILITY_LEVEL,
        rendering_threads: int = DEFAULT_RENDERING_THREADS,
        keep_partial_output: bool = False,
    ) -> None:
        """Initialize the runner.

        Args:
            executable: Ghostscript executable name or path.
            compatibility_level: Value for ``-dCompatibilityLevel`` when compressing.
            rendering_threads: Value for ``-dNumRenderingThreads`` when compressing.
            keep_partial_output: Leave the output file on disk when Ghostscript fails.
        """
        self.executable = executable
        self.compatibility_level = compatibility_level
        self.rendering_threads = rendering_threads
        self.keep_partial_output = keep_partial_output

    def merge(self, request: MergeRequest) -> None:
        """Merge ``request.inputs`` into ``request.output``."""

        argv = build_merge_argv(request, self.executable)
        self._run(argv, request.output, operation="merge", source_count=len(request.inputs))

    def compress(self, request: CompressRequest) -> None:
        """Recompress ``request.source`` into ``request.output``."""

        argv = build_compress_argv(
            request,
            self.executable,
            compatibility_level=self.compatibility_level,
            rendering_threads=self.rendering_threads,
        )
        self._run(
            argv,
            request.output,
            operation="compress",
            source_count=1,
            profile=request.profile.value,
        )

    def _run(self, argv: list[str], output: Path, **event_fields: Any) -> None:
        """Invoke Ghostscript and wait for it to exit.

        Raises:
            EngineNotFoundError: If the executable cannot be launched.
            EngineFailedError: If Ghostscript exits with a non-zero status.
        """
        output_path = str(output)
        logger.info(
            "Running Ghostscript",
            extra={"engine_event": "engine.start", "output_path": output_path, **event_fields},
        )
        logger.debug("Ghostscript command: %s", shlex.join(argv))

        before = _snapshot(output)
        started = time.perf_counter()
        try:
            # stdin closed so a run without -dBATCH cannot sit at the GS> prompt
            _ = subprocess.run(argv, check=True, stdin=subprocess.DEVNULL)
        except subprocess.CalledProcessError as e:
            logger.debug(
                "Ghostscript failed",
                extra={
                    "engine_event": "engine.error",
                    "output_path": output_path,
                    "returncode": e.returncode,
                    **event_fields,
                },
            )
            self._discard_partial_output(output, before)
            raise EngineFailedError(
                f"Ghostscript exited with status {e.returncode}", argv, e.returncode
            ) from e
        except OSError as e:
            logger.debug(
                "Ghostscript could not be launched",
                extra={
                    "engine_event": "engine.error",
                    "output_path": output_path,
                    "error_message": str(e),
                    **event_fields,
                },
            )
            raise EngineNotFoundError(
                f"Could not launch Ghostscript ({argv[0]}): {e}", argv
            ) from e

        logger.debug(
            "Ghostscript finished",
            extra={
                "engine_event": "engine.success",
                "output_path": output_path,
                "duration_ms": (time.perf_counter() - started) * 1000,
                **event_fields,
            },
        )

    def _discard_partial_output(self, output: Path, before: tuple[int, int] | None) -> None:
        """Delete whatever Ghostscript managed to write before failing.

        A file that was already there and is unchanged is left alone.
        """
        if self.keep_partial_output or not output.exists():
            return
        if before is not None and _snapshot(output) == before:
            return
        output.unlink()
        logger.warning(
            "Removed partial output %s",
            output,
            extra={"engine_event": "engine.cleanup", "output_path": str(output)},
        )


def _snapshot(path: Path) -> tuple[int, int] | None:
    """Return ``(mtime_ns, size)`` for an existing file, else ``None``."""

    try:
        stat = path.stat()
    except FileNotFoundError:
        return None
    return stat.st_mtime_ns, stat.st_size


__all__ = ["GhostscriptRunner"]
