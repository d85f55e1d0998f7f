"""
Summary: Requests, outcomes and enumerations for merge and compress runs.
Why: Give every workflow result an explicit variant instead of None or exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Final, Literal, TypeAlias


class Operation(str, Enum):
    """Top-level menu choices."""

    MERGE = "merge"
    COMPRESS = "compress"
    EXIT = "exit"
    INVALID = "invalid"


class CompressionProfile(str, Enum):
    """Ghostscript ``-dPDFSETTINGS`` presets, in menu order."""

    EBOOK = "ebook"
    SCREEN = "screen"
    PRINTER = "printer"
    PREPRESS = "prepress"
    DEFAULT = "default"

    @staticmethod
    def from_user_input(value: str) -> "CompressionProfile":
        """Translate a raw answer into the matching profile."""

        normalized = value.strip().lower()
        for profile in CompressionProfile:
            if profile.value == normalized:
                return profile
        valid: Final[str] = ", ".join(p.value for p in CompressionProfile)
        msg = f"Unsupported compression profile '{value}'. Valid options: {valid}"
        raise ValueError(msg)


class OperationOutcome(str, Enum):
    """How a merge or compress workflow ended."""

    COMPLETED = "completed"
    NO_INPUT = "no_input"
    NO_CANDIDATES = "no_candidates"
    CANCELLED = "cancelled"


class Cancelled(Enum):
    """Sentinel type returned when the user declines to continue."""

    CANCELLED = "cancelled"


CANCELLED: Final = Cancelled.CANCELLED

OutputChoice: TypeAlias = Path | Literal[Cancelled.CANCELLED]


@dataclass(slots=True, frozen=True)
class MergeRequest:
    """Files to merge, in the order the user picked them."""

    inputs: tuple[str, ...]
    output: Path

    def __post_init__(self) -> None:
        if not self.inputs:
            raise ValueError("A merge request needs at least one input file")


@dataclass(slots=True, frozen=True)
class CompressRequest:
    """A single file to recompress with a given profile."""

    source: str
    output: Path
    profile: CompressionProfile

    def __post_init__(self) -> None:
        if not isinstance(self.profile, CompressionProfile):
            raise ValueError(f"Unsupported compression profile: {self.profile!r}")


@dataclass(slots=True, frozen=True)
class SizeReport:
    """Byte sizes of a file before and after compression."""

    source: str
    before: int
    after: int

    @property
    def delta_percent(self) -> float:
        """Percentage saved; negative when the output grew."""

        if self.before == 0:
            return 0.0
        return (1 - self.after / self.before) * 100


@dataclass(slots=True, frozen=True)
class MergeResult:
    """Outcome of one merge workflow run."""

    outcome: OperationOutcome
    request: MergeRequest | None = None


@dataclass(slots=True, frozen=True)
class CompressResult:
    """Outcome of one compress workflow run."""

    outcome: OperationOutcome
    request: CompressRequest | None = None
    report: SizeReport | None = None


__all__ = [
    "CANCELLED",
    "Cancelled",
    "CompressRequest",
    "CompressResult",
    "CompressionProfile",
    "MergeRequest",
    "MergeResult",
    "Operation",
    "OperationOutcome",
    "OutputChoice",
    "SizeReport",
]
