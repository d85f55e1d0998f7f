"""Command line argument options."""

from dataclasses import dataclass
from typing import final


@final
@dataclass(slots=True, frozen=True)
class CLIArgs:
    """Parsed launch flags, handed by value to the dispatcher."""

    compress: bool = False
    merge: bool = False
    version: bool = False
    verbose: bool = False

    @property
    def interactive(self) -> bool:
        """Whether the menu loop should run instead of a single operation."""
        return not (self.compress or self.merge)


__all__ = ["CLIArgs"]
