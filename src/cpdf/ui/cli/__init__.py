"""Command line interface package for cpdf."""

from cpdf.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
