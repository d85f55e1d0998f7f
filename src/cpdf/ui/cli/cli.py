"""Command line interface for cpdf."""

import sys
from typing import final

from cpdf.config.config import Config
from cpdf.exceptions import CpdfError
from cpdf.platform.logging import logger
from cpdf.ui.cli.args import ArgumentParser, CLIArgs
from cpdf.ui.cli.commands import CommandExecutor, CompressCommand, MenuCommand, MergeCommand
from cpdf.ui.cli.display import ResultDisplay, VersionDisplay


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments and run the chosen mode.

        Every fatal failure ends up here: it is logged and the process exits
        with status 1 (130 when interrupted).

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if args.version:
                VersionDisplay().show()
                return

            ResultDisplay().show_welcome()
            CommandProcessor._build_command(args, Config.load()).execute()

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except CpdfError as e:
            logger.error("%s", e)
            sys.exit(1)
        except OSError as e:
            logger.error("Filesystem error: %s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)

    @staticmethod
    def _build_command(args: CLIArgs, config: Config) -> CommandExecutor:
        """Pick the executor for the launch flags; compress wins over merge."""

        if args.interactive:
            return MenuCommand(args, config)
        if args.compress:
            return CompressCommand(args, config)
        return MergeCommand(args, config)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Fatal errors call
        ``sys.exit(...)`` before this return is reached.
    """
    CommandProcessor.process_command()
    return 0
