"""User interface layers for cpdf."""
