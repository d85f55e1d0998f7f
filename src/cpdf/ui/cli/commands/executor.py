"""src/cpdf/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Build prompts, filesystem, engine and displays once per command.
"""

from abc import ABC, abstractmethod

from cpdf.config.config import Config
from cpdf.features.pdf import CompressWorkflow, MergeWorkflow, OperationOutcome
from cpdf.platform.filesystem import LocalFileSystem
from cpdf.platform.ghostscript import GhostscriptRunner
from cpdf.ui.cli.args.options import CLIArgs
from cpdf.ui.cli.display.result import ResultDisplay
from cpdf.ui.cli.prompts import RichPromptSession


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: CLIArgs
    config: Config
    prompts: RichPromptSession
    filesystem: LocalFileSystem
    engine: GhostscriptRunner
    result_display: ResultDisplay

    def __init__(self, args: CLIArgs, config: Config) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            config: Loaded application configuration.
        """
        self.args = args
        self.config = config
        self.prompts = RichPromptSession()
        self.filesystem = LocalFileSystem()
        self.engine = GhostscriptRunner(
            config.gs_executable,
            compatibility_level=config.compatibility_level,
            rendering_threads=config.rendering_threads,
            keep_partial_output=config.keep_partial_output,
        )
        self.result_display = ResultDisplay()

    @abstractmethod
    def execute(self) -> list[OperationOutcome]:
        """Execute the command.

        Returns:
            Outcomes of the operations that ran, in order.
        """
        pass

    def run_merge(self) -> OperationOutcome:
        """Run one merge and display its result."""

        workflow = MergeWorkflow(
            self.prompts,
            self.filesystem,
            self.engine,
            default_output=self.config.default_merge_output,
        )
        result = workflow.run()
        self.result_display.show_merge(result)
        return result.outcome

    def run_compress(self) -> OperationOutcome:
        """Run one compression and display its size report."""

        result = CompressWorkflow(self.prompts, self.filesystem, self.engine).run()
        self.result_display.show_compress(result)
        return result.outcome
