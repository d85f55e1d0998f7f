"""
Summary: Tests for the compress workflow and its size report.
Why: Sizes must be measured around exactly one engine invocation.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from fakes import RecordingEngine, ScriptedPrompts

from cpdf.features.pdf.domain.models import CompressionProfile, OperationOutcome
from cpdf.features.pdf.usecases.compress import CompressWorkflow, default_compressed_name
from cpdf.platform.filesystem import LocalFileSystem


def test_default_compressed_name() -> None:
    assert default_compressed_name("scan.pdf") == "scan.compressed.pdf"
    assert default_compressed_name("archive.v2.pdf") == "archive.v2.compressed.pdf"


def test_compress_reports_sizes(workdir: Path) -> None:
    _ = (workdir / "scan.pdf").write_bytes(b"x" * 1000)
    prompts = ScriptedPrompts(selects=["scan.pdf", "screen"], texts=[""])
    engine = RecordingEngine(output_size=600)

    result = CompressWorkflow(prompts, LocalFileSystem(), engine).run()

    assert result.outcome is OperationOutcome.COMPLETED
    assert result.request is not None
    assert result.request.output == Path("scan.compressed.pdf")
    assert result.request.profile is CompressionProfile.SCREEN
    assert result.report is not None
    assert (result.report.before, result.report.after) == (1000, 600)
    assert result.report.delta_percent == pytest.approx(40.0)
    assert len(engine.compressions) == 1


def test_compress_asks_for_output_before_profile(workdir: Path) -> None:
    _ = (workdir / "scan.pdf").write_bytes(b"x")
    prompts = ScriptedPrompts(selects=["scan.pdf", "ebook"], texts=["small"])

    _ = CompressWorkflow(prompts, LocalFileSystem(), RecordingEngine(output_size=1)).run()

    assert prompts.kinds() == ["select", "text", "select"]
    assert prompts.text_defaults == ["scan.compressed.pdf"]


def test_compress_cancelled_skips_profile_and_engine(workdir: Path) -> None:
    _ = (workdir / "scan.pdf").write_bytes(b"x")
    _ = (workdir / "scan.compressed.pdf").write_bytes(b"y")
    prompts = ScriptedPrompts(selects=["scan.pdf"], texts=[""], confirms=[False])
    engine = RecordingEngine()

    result = CompressWorkflow(prompts, LocalFileSystem(), engine).run()

    assert result.outcome is OperationOutcome.CANCELLED
    assert engine.compressions == []
    assert prompts.kinds() == ["select", "text", "confirm"]


def test_compress_rejects_unknown_profile_before_engine(workdir: Path) -> None:
    _ = (workdir / "scan.pdf").write_bytes(b"x")
    prompts = ScriptedPrompts(selects=["scan.pdf", "maximum"], texts=[""])
    engine = RecordingEngine()

    with pytest.raises(ValueError):
        _ = CompressWorkflow(prompts, LocalFileSystem(), engine).run()

    assert engine.compressions == []


def test_compress_without_candidates(workdir: Path) -> None:
    result = CompressWorkflow(ScriptedPrompts(), LocalFileSystem(), RecordingEngine()).run()

    assert result.outcome is OperationOutcome.NO_CANDIDATES
