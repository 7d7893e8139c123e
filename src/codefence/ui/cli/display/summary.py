"""src/codefence/ui/cli/display/summary.py
What: Render the excluded/printed listings written after all arguments.
Why: Keep the end-of-run report on stderr, apart from printed file contents.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.text import Text

from codefence.features.selection import SelectionReporter


@final
class SummaryDisplay:
    """Writes the excluded/printed listings to stderr."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True, soft_wrap=True, highlight=False)

    def show_summary(self, reporter: SelectionReporter) -> None:
        """Render the listings collected by ``reporter``.

        Args:
            reporter: Reporter populated by a finished run.
        """
        for line in reporter.summary_lines():
            # Text() keeps bracketed file names from being read as markup.
            self.console.print(Text(line))
