"""src/cpdf/ui/cli/commands/merge.py
What: Run a single merge for ``cpdf --merge``.
Why: Skip the menu when the operation is chosen at launch.
"""

from typing import override

from cpdf.features.pdf import OperationOutcome
from cpdf.ui.cli.commands.executor import CommandExecutor


class MergeCommand(CommandExecutor):
    """Command for one merge run."""

    @override
    def execute(self) -> list[OperationOutcome]:
        return [self.run_merge()]
