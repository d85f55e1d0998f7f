"""Configuration package for cpdf."""

from cpdf.config.config import Config

__all__ = ["Config"]
