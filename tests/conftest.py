"""Shared pytest fixtures for cpdf tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from cpdf.config.config import Config
from cpdf.platform.logging import setup_logger


@pytest.fixture(autouse=True)
def isolated_app_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point config and data directories at a temporary location.

    Also resets the configuration singleton and restores a console-only logger
    afterwards so no file handler outlives the test.
    """

    monkeypatch.setenv("CPDF_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.setenv("CPDF_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("CPDF_COMMIT", raising=False)
    monkeypatch.delenv("CPDF_BUILD_SOURCE", raising=False)
    monkeypatch.setattr(Config, "_instance", None)

    yield tmp_path

    _ = setup_logger()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test inside an empty working directory."""

    directory = tmp_path / "work"
    directory.mkdir()
    monkeypatch.chdir(directory)
    return directory
