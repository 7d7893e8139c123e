"""Domain types for file selection."""

from .models import (
    DisplayMode,
    Excluded,
    Printed,
    SelectionContext,
    SelectionOutcome,
    SkipReason,
    Skipped,
)

__all__ = [
    "DisplayMode",
    "Excluded",
    "Printed",
    "SelectionContext",
    "SelectionOutcome",
    "SkipReason",
    "Skipped",
]
