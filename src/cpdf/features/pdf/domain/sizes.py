"""
Summary: Human-readable byte sizes and before/after compression summaries.
Why: Keep report formatting pure so it can be rendered by any console.
"""

from __future__ import annotations

from typing import Final

from rich.markup import escape

from .models import SizeReport

_KB: Final[int] = 1024
_MB: Final[int] = 1024 * _KB


def format_size(size: int) -> str:
    """Render ``size`` bytes as ``B``, ``KB`` or ``MB``."""

    if size >= _MB:
        return f"{size / _MB:.2f} MB"
    if size >= _KB:
        return f"{size / _KB:.2f} KB"
    return f"{size} B"


def format_delta(delta_percent: float) -> str:
    """Render a size delta as Rich markup.

    A shrink is shown as ``-X.XX%`` in red and growth as ``+X.XX%`` in green;
    an unchanged size is left unadorned.
    """

    if delta_percent > 0:
        return f"[red]-{delta_percent:.2f}%[/red]"
    if delta_percent < 0:
        return f"[green]+{-delta_percent:.2f}%[/green]"
    return f"{delta_percent:.2f}%"


def render_size_report(report: SizeReport) -> str:
    """Render ``<source> : <before> -> <after>, <delta>`` as Rich markup."""

    return (
        f"{escape(report.source)} : {format_size(report.before)} -> "
        f"{format_size(report.after)}, {format_delta(report.delta_percent)}"
    )


__all__ = ["format_delta", "format_size", "render_size_report"]
