"""src/cpdf/ui/cli/commands/menu.py
What: Loop the operation menu until the user exits.
Why: Back the flag-less interactive mode of the CLI.
"""

from typing import override

from cpdf.features.pdf import Operation, OperationOutcome, SelectionWorkflow
from cpdf.ui.cli.commands.executor import CommandExecutor


class MenuCommand(CommandExecutor):
    """Interactive menu: Idle -> Running -> Idle until Exit is chosen."""

    @override
    def execute(self) -> list[OperationOutcome]:
        """Run operations chosen from the menu.

        Returns:
            Outcomes of every merge or compress run, in order.
        """
        selection = SelectionWorkflow(self.prompts)
        outcomes: list[OperationOutcome] = []

        while True:
            operation = selection.choose_operation()
            if operation is Operation.EXIT:
                self.result_display.show_exit()
                return outcomes
            if operation is Operation.MERGE:
                outcomes.append(self.run_merge())
            elif operation is Operation.COMPRESS:
                outcomes.append(self.run_compress())
            else:
                self.result_display.show_invalid_option()
