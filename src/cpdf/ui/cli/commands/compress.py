"""src/cpdf/ui/cli/commands/compress.py
What: Run a single compression for ``cpdf --compress``.
Why: Skip the menu when the operation is chosen at launch.
"""

from typing import override

from cpdf.features.pdf import OperationOutcome
from cpdf.ui.cli.commands.executor import CommandExecutor


class CompressCommand(CommandExecutor):
    """Command for one compress run."""

    @override
    def execute(self) -> list[OperationOutcome]:
        return [self.run_compress()]
