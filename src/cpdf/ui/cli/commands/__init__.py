"""Command execution package for CLI."""

from cpdf.ui.cli.commands.executor import CommandExecutor
from cpdf.ui.cli.commands.compress import CompressCommand
from cpdf.ui.cli.commands.menu import MenuCommand
from cpdf.ui.cli.commands.merge import MergeCommand

__all__ = [
    "CommandExecutor",
    "CompressCommand",
    "MenuCommand",
    "MergeCommand",
]
