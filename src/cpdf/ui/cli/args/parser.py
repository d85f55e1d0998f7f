"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from typing import final

from cpdf.config.config import Config
from cpdf.config.paths import default_log_file
from cpdf.platform.logging import logger, setup_logger
from cpdf.ui.cli.args.options import CLIArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="cpdf",
            description=(
                "Merge or compress the PDF files in the current directory with Ghostscript.\n"
                "Without flags an interactive menu is shown."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "-c",
            "--compress",
            action="store_true",
            help="Compress one PDF and exit",
        )
        _ = parser.add_argument(
            "-m",
            "--merge",
            action="store_true",
            help="Merge several PDFs and exit",
        )
        _ = parser.add_argument(
            "-v",
            "--version",
            action="store_true",
            help="Print version information and exit",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show Ghostscript commands and other debug output",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments and configure logging.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Immutable launch flags.

        Raises:
            SystemExit: If unknown arguments are given without ``--version``.
            ConfigError: If the configuration file is invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args, unknown = parser.parse_known_args(args_list)

        args = CLIArgs(
            compress=bool(parsed_args.compress),
            merge=bool(parsed_args.merge),
            version=bool(parsed_args.version),
            verbose=bool(parsed_args.verbose),
        )

        # --version wins over everything, including arguments we do not know.
        if args.version:
            return args

        if unknown:
            parser.error(f"unrecognized arguments: {' '.join(unknown)}")

        log_level = logging.DEBUG if args.verbose else logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or default_log_file()
        try:
            _ = setup_logger(log_file=log_file_path, console_level=log_level)
        except OSError as e:
            _ = setup_logger(log_file=None, console_level=log_level)
            logger.warning("Logging to the console only; cannot open %s: %s", log_file_path, e)

        return args
