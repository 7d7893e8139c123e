"""File selection: resolve arguments, filter, walk, classify, and report."""

from .domain import (
    DisplayMode,
    Excluded,
    Printed,
    SelectionContext,
    SelectionOutcome,
    SkipReason,
    Skipped,
)
from .usecases import ExclusionMatcher, SelectionEngine, SelectionReporter

__all__ = [
    "DisplayMode",
    "Excluded",
    "ExclusionMatcher",
    "Printed",
    "SelectionContext",
    "SelectionEngine",
    "SelectionOutcome",
    "SelectionReporter",
    "SkipReason",
    "Skipped",
]
