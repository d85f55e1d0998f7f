"""src/cpdf/ui/cli/prompts.py
What: Implement single-choice, multi-choice, text and yes/no prompts with Rich.
Why: Give the PDF workflows a terminal-backed prompt capability.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from typing import Final, TypeVar, final

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from cpdf.exceptions import PromptAbortedError

_T = TypeVar("_T")

_SELECTION_SPLIT: Final[re.Pattern[str]] = re.compile(r"[,\s]+")


def parse_multi_selection(raw: str, option_count: int) -> list[int]:
    """Parse ``"3, 1 2"`` into zero-based indexes, keeping the typed order.

    Duplicates are dropped after their first occurrence.

    Raises:
        ValueError: If a token is not a number between 1 and ``option_count``.
    """
    indexes: list[int] = []
    for token in _SELECTION_SPLIT.split(raw.strip()):
        if not token:
            continue
        if not token.isdigit() or not 1 <= int(token) <= option_count:
            raise ValueError(f"'{token}' is not a number between 1 and {option_count}")
        index = int(token) - 1
        if index not in indexes:
            indexes.append(index)
    return indexes


@final
class RichPromptSession:
    """Prompt capability backed by ``rich.prompt``."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def select(self, message: str, options: Sequence[str]) -> str:
        """Show a numbered list and return the chosen option."""

        if not options:
            raise ValueError("Cannot select from an empty list")

        self._render_options(options)
        keys = [str(number) for number in range(1, len(options) + 1)]
        answer = self._ask(
            message,
            Prompt.ask,
            escape(message),
            console=self.console,
            choices=keys,
            show_choices=False,
        )
        return options[int(answer) - 1]

    def multi_select(self, message: str, options: Sequence[str]) -> list[str]:
        """Show a numbered list and return the picked options in typed order.

        A blank answer selects nothing.
        """
        if not options:
            return []

        self._render_options(options)
        while True:
            raw = self._ask(
                message,
                Prompt.ask,
                f"{escape(message)} (numbers separated by spaces or commas, blank for none)",
                console=self.console,
                default="",
                show_default=False,
            )
            try:
                indexes = parse_multi_selection(raw, len(options))
            except ValueError as exc:
                self.console.print(f"[prompt.invalid]{escape(str(exc))}")
                continue
            return [options[index] for index in indexes]

    def text(self, message: str, default: str) -> str:
        return self._ask(message, Prompt.ask, escape(message), console=self.console, default=default)

    def confirm(self, message: str) -> bool:
        return self._ask(message, Confirm.ask, escape(message), console=self.console, default=False)

    def _render_options(self, options: Sequence[str]) -> None:
        for number, option in enumerate(options, start=1):
            self.console.print(f"  [cyan]{number}[/cyan]) {escape(option)}")

    @staticmethod
    def _ask(message: str, ask: Callable[..., _T], *args: object, **kwargs: object) -> _T:
        """Call a Rich prompt, turning end of input into a fatal prompt error."""

        try:
            return ask(*args, **kwargs)
        except EOFError as exc:
            raise PromptAbortedError(message) from exc


__all__ = ["RichPromptSession", "parse_multi_selection"]
