"""cpdf: merge and compress the PDF files in the current directory with Ghostscript."""

__version__ = "0.1.0"

# Overwritten by release builds; see ``cpdf.ui.cli.display.version``.
__commit__ = "unknown"
__build_source__ = "unknown"
