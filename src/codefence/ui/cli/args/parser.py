"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from typing import final

from codefence import __version__
from codefence.config import Config
from codefence.platform.logging import setup_logger
from codefence.ui.cli.args.options import SelectArgs


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
            prog="codefence",
            description=(
                "Print files as fenced code blocks labelled with their paths. "
                "Diagnostics are written to stderr."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "paths",
            nargs="*",
            metavar="PATH",
            help="Files or directories to print",
        )
        _ = parser.add_argument(
            "-a",
            "--absolute",
            action="store_true",
            help="Show absolute paths instead of paths relative to the working directory",
        )
        _ = parser.add_argument(
            "-r",
            "--recursive",
            action="store_true",
            help="Descend into directory arguments",
        )
        _ = parser.add_argument(
            "-e",
            "--exclude",
            action="append",
            default=[],
            metavar="PATTERN",
            help=(
                "Skip any path whose resolved form contains the resolved PATTERN "
                "(substring match, repeatable)"
            ),
        )
        _ = parser.add_argument(
            "--allow-empty",
            action="store_true",
            help="Exit with status 0 even when no file was printed",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show traversal details",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress per-file warnings",
        )
        _ = parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> SelectArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            SelectArgs: Flags merged with the configured defaults.

        Raises:
            ConfigError: If the configuration file is invalid.
            SystemExit: On usage errors, ``--help`` or ``--version``.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        return SelectArgs(
            paths=list(parsed_args.paths),
            absolute=parsed_args.absolute or configuration.absolute,
            recursive=parsed_args.recursive or configuration.recursive,
            exclude=[*configuration.exclude, *parsed_args.exclude],
            fail_on_empty=configuration.fail_on_empty and not parsed_args.allow_empty,
        )
