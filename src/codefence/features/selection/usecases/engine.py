"""
Summary: Turn raw path arguments into printed files and recorded outcomes.
Why: One state machine keeps single-file and recursive selection consistent.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path
from typing import final

from codefence.features.selection.domain.models import (
    Excluded,
    Printed,
    SelectionContext,
    SelectionOutcome,
    SkipReason,
    Skipped,
)
from codefence.platform.logging import logger

from .exclusion import ExclusionMatcher
from .path_resolver import resolve, to_display
from .reporter import SelectionReporter
from .text_classifier import read_as_text
from .walker import collect_files

Printer = Callable[[str, str], None]


@final
class SelectionEngine:
    """Resolve, filter, classify, and print each argument in order.

    Each argument is checked in this order: directory (walk when recursive,
    otherwise skip), excluded, regular file (read and print unless binary),
    symlink, missing, and finally anything else.
    """

    context: SelectionContext
    matcher: ExclusionMatcher
    printer: Printer
    reporter: SelectionReporter

    def __init__(
        self,
        context: SelectionContext,
        matcher: ExclusionMatcher,
        printer: Printer,
    ) -> None:
        """Initialize the engine for a single run.

        Args:
            context: Run-wide settings including the captured working directory.
            matcher: Exclusion patterns already canonicalized for this run.
            printer: Receives ``(display_path, contents)`` for every printed file.
        """
        self.context = context
        self.matcher = matcher
        self.printer = printer
        self.reporter = SelectionReporter()
        self._printed: set[Path] = set()

    def run(self, arguments: Iterable[str]) -> SelectionReporter:
        """Process every argument and return the populated reporter.

        Raises:
            OSError: If a top-level file argument cannot be read.
        """
        for argument in arguments:
            logger.debug("Processing argument %s", argument)
            self._process_argument(argument)
        return self.reporter

    def _record(self, outcome: SelectionOutcome) -> None:
        self.reporter.record(outcome)

    def _display(self, canonical: Path) -> str:
        return str(to_display(canonical, self.context.display_mode, self.context.cwd))

    def _process_argument(self, argument: str) -> None:
        # An empty argument names no path; joining it would yield cwd itself.
        if not argument:
            self._record(Skipped(argument, SkipReason.DOES_NOT_EXIST))
            return

        candidate = self.context.cwd / argument

        if candidate.is_dir():
            if not self.context.recursive:
                self._record(Skipped(argument, SkipReason.IS_DIRECTORY))
                return
            self._process_directory(candidate)
            return

        canonical = resolve(argument, self.context.cwd)
        if self.matcher.is_excluded(canonical):
            self._record(Excluded(self._display(canonical)))
            return

        if candidate.is_file():
            self._emit(canonical, tolerate_errors=False)
        elif candidate.is_symlink():
            self._record(Skipped(argument, SkipReason.IS_SYMLINK))
        elif not candidate.exists():
            self._record(Skipped(argument, SkipReason.DOES_NOT_EXIST))
        else:
            self._record(Skipped(argument, SkipReason.NOT_A_FILE))

    def _process_directory(self, directory: Path) -> None:
        def on_walk_error(path: Path, error: OSError) -> None:
            self._record(Skipped(self._display(path), SkipReason.UNREADABLE, _describe(error)))

        for canonical in collect_files(
            directory, self.matcher, self.context.cwd, on_error=on_walk_error
        ):
            self._emit(canonical, tolerate_errors=True)

    def _emit(self, canonical: Path, *, tolerate_errors: bool) -> None:
        display_path = self._display(canonical)

        if canonical in self._printed:
            self._record(Skipped(display_path, SkipReason.DUPLICATE))
            return

        try:
            text = read_as_text(canonical)
        except OSError as e:
            if not tolerate_errors:
                raise
            self._record(Skipped(display_path, SkipReason.UNREADABLE, _describe(e)))
            return

        if text is None:
            self._record(Skipped(display_path, SkipReason.NOT_TEXT))
            return

        self.printer(display_path, text)
        self._printed.add(canonical)
        self._record(Printed(display_path))


def _describe(error: OSError) -> str:
    return error.strerror or str(error)


__all__ = ["Printer", "SelectionEngine"]
