"""Command line interface for codefence."""

import sys
from collections.abc import Sequence
from typing import final

from codefence.config import ConfigError
from codefence.features.selection import (
    ExclusionMatcher,
    SelectionContext,
    SelectionEngine,
    SelectionReporter,
)
from codefence.platform.logging import logger
from codefence.ui.cli.args import ArgumentParser, SelectArgs
from codefence.ui.cli.display import FencePrinter, SummaryDisplay


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: Sequence[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            reporter = CommandProcessor.run_selection(args)
            if not reporter.found_any and args.fail_on_empty:
                sys.exit(1)
            return

        except ConfigError as e:
            logger.error("%s", str(e))
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)

    @staticmethod
    def run_selection(args: SelectArgs) -> SelectionReporter:
        """Print every selected file and emit the end-of-run diagnostics."""

        context = SelectionContext.capture(absolute=args.absolute, recursive=args.recursive)
        matcher = ExclusionMatcher.from_patterns(args.exclude, context.cwd)
        engine = SelectionEngine(context, matcher, FencePrinter())

        reporter = engine.run(args.paths)
        SummaryDisplay().show_summary(reporter)
        if not reporter.found_any:
            logger.error(SelectionReporter.no_files_message(args.paths))
        return reporter


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
