"""Use cases for the PDF feature: selection, output resolution and workflows."""
