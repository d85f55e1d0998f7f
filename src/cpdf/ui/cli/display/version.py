"""Version banner for ``cpdf --version``."""

from __future__ import annotations

import os
import platform
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version
from typing import final

from rich.console import Console

import cpdf


@dataclass(slots=True, frozen=True)
class VersionInfo:
    """Build and platform metadata shown by ``--version``."""

    version: str
    commit: str
    build_source: str
    os_name: str
    arch: str

    def render(self) -> str:
        return f"cpdf v{self.version}@{self.commit}, {self.build_source}, {self.os_name}/{self.arch}"


def collect_version_info() -> VersionInfo:
    """Gather version metadata from the installed distribution and environment.

    ``CPDF_COMMIT`` and ``CPDF_BUILD_SOURCE`` override the values baked into
    the package.
    """
    try:
        package_version = version("cpdf")
    except PackageNotFoundError:
        package_version = cpdf.__version__

    return VersionInfo(
        version=package_version,
        commit=os.environ.get("CPDF_COMMIT") or cpdf.__commit__,
        build_source=os.environ.get("CPDF_BUILD_SOURCE") or cpdf.__build_source__,
        os_name=platform.system().lower() or "unknown",
        arch=platform.machine() or "unknown",
    )


@final
class VersionDisplay:
    """Print the version banner."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show(self) -> None:
        self.console.print(collect_version_info().render(), markup=False, highlight=False)


__all__ = ["VersionDisplay", "VersionInfo", "collect_version_info"]
