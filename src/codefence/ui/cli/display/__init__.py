"""Display management for CLI interface."""

from codefence.ui.cli.display.fence import FencePrinter
from codefence.ui.cli.display.summary import SummaryDisplay

__all__ = ["FencePrinter", "SummaryDisplay"]
