"""src/cpdf/ui/cli/display/result.py
What: Render user-facing messages for merge, compress and menu outcomes.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from typing import Final, final

from rich.console import Console
from rich.markup import escape

from cpdf.features.pdf.domain.models import (
    CompressResult,
    MergeResult,
    OperationOutcome,
)
from cpdf.features.pdf.domain.sizes import render_size_report

_NO_OP_MESSAGES: Final[dict[OperationOutcome, str]] = {
    OperationOutcome.NO_INPUT: "[yellow]No files selected![/yellow]",
    OperationOutcome.NO_CANDIDATES: "[yellow]No PDF files found in the current directory.[/yellow]",
}


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize result display."""
        self.console = console or Console()

    def show_welcome(self) -> None:
        self.console.print("[bold]Welcome to cpdf[/bold]")

    def show_invalid_option(self) -> None:
        self.console.print("[red]Invalid option[/red]")

    def show_exit(self) -> None:
        self.console.print("Bye")

    def show_merge(self, result: MergeResult) -> None:
        """Display the outcome of a merge run.

        Args:
            result: Merge workflow result. A cancelled run prints nothing.
        """
        if self._show_no_op(result.outcome):
            return

        assert result.request is not None
        self.console.print(
            f"[green]Merge succeeded![/green] Output file: {escape(str(result.request.output))}"
        )

    def show_compress(self, result: CompressResult) -> None:
        """Display the before/after sizes of a compress run.

        Args:
            result: Compress workflow result. A cancelled run prints nothing.
        """
        if self._show_no_op(result.outcome):
            return

        assert result.report is not None and result.request is not None
        self.console.print(render_size_report(result.report))
        self.console.print(
            f"[green]Compression succeeded![/green] Output file: {escape(str(result.request.output))}"
        )

    def _show_no_op(self, outcome: OperationOutcome) -> bool:
        """Print the message for a no-op outcome; return whether one applied."""

        if outcome is OperationOutcome.COMPLETED:
            return False
        message = _NO_OP_MESSAGES.get(outcome)
        if message is not None:
            self.console.print(message)
        return True
