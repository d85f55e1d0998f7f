"""Command line argument handling package."""

from cpdf.ui.cli.args.options import CLIArgs
from cpdf.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "CLIArgs"]
