"""
Summary: Validate Summary/Why header docstring schema for selected modules.
Why: Prevent regression to inconsistent header formats across touched files.
"""

from __future__ import annotations

from pathlib import Path

import pytest

REPO_ROOT: Path = Path(__file__).resolve().parents[1]
HEADER_OPEN: str = '"""'
HEADER_CLOSE: str = '"""'
SUMMARY_PREFIX: str = "Summary: "
WHY_PREFIX: str = "Why: "
SUMMARY_OFFSET: int = 1
WHY_OFFSET: int = 2
CLOSE_OFFSET: int = 3
HEADER_LENGTH: int = 4

TARGET_MODULES: tuple[Path, ...] = (
    Path("src/cpdf/exceptions.py"),
    Path("src/cpdf/features/pdf/domain/__init__.py"),
    Path("src/cpdf/features/pdf/domain/models.py"),
    Path("src/cpdf/features/pdf/domain/sizes.py"),
    Path("src/cpdf/features/pdf/usecases/ports.py"),
    Path("src/cpdf/features/pdf/usecases/output_resolver.py"),
    Path("src/cpdf/features/pdf/usecases/selection.py"),
    Path("src/cpdf/features/pdf/usecases/merge.py"),
    Path("src/cpdf/features/pdf/usecases/compress.py"),
    Path("src/cpdf/platform/ghostscript/commands.py"),
    Path("src/cpdf/platform/ghostscript/runner.py"),
    Path("tests/features/pdf/domain/test_models.py"),
    Path("tests/features/pdf/usecases/test_output_resolver.py"),
    Path("tests/features/pdf/usecases/test_merge_workflow.py"),
    Path("tests/features/pdf/usecases/test_compress_workflow.py"),
    Path("tests/platform/ghostscript/test_commands.py"),
)


@pytest.mark.parametrize("module_path", TARGET_MODULES, ids=lambda path: str(path))
def test_module_headers_follow_summary_why_schema(module_path: Path) -> None:
    """Ensure module header docstring uses Summary and Why lines."""

    content_lines = (REPO_ROOT / module_path).read_text(encoding="utf-8").splitlines()
    start_index = next(
        (index for index, line in enumerate(content_lines) if line.strip()),
        None,
    )
    assert start_index is not None, f"{module_path} must not be empty"

    assert len(content_lines) >= start_index + HEADER_LENGTH, (
        f"{module_path} must provide at least {HEADER_LENGTH} header lines"
    )

    opening_line = content_lines[start_index].strip()
    assert opening_line == HEADER_OPEN, f"{module_path} must start with header docstring"

    summary_line = content_lines[start_index + SUMMARY_OFFSET]
    why_line = content_lines[start_index + WHY_OFFSET]
    closing_line = content_lines[start_index + CLOSE_OFFSET].strip()

    assert summary_line.startswith(SUMMARY_PREFIX), (
        f"{module_path} summary line must begin with '{SUMMARY_PREFIX}'"
    )
    assert why_line.startswith(WHY_PREFIX), (
        f"{module_path} why line must begin with '{WHY_PREFIX}'"
    )
    assert closing_line == HEADER_CLOSE, (
        f"{module_path} header must close with triple quotes"
    )

    assert summary_line.removeprefix(SUMMARY_PREFIX).strip(), (
        f"{module_path} summary text cannot be empty"
    )
    assert why_line.removeprefix(WHY_PREFIX).strip(), (
        f"{module_path} why text cannot be empty"
    )
