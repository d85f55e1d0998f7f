"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export configured logger, setup helpers, and the custom Rich handler.
Why: Provide a single canonical import path for application logging.
"""

from __future__ import annotations

from .config import logger, setup_logger
from .handlers import EngineEventRichHandler

__all__ = [
    "EngineEventRichHandler",
    "logger",
    "setup_logger",
]
