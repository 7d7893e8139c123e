"""
Summary: Public surface of the file selection use cases.
Why: Let the CLI import the engine and helpers from one place.
"""

from .engine import Printer, SelectionEngine
from .exclusion import ExclusionMatcher
from .path_resolver import resolve, to_display
from .reporter import SelectionReporter
from .text_classifier import read_as_text
from .walker import collect_files

__all__ = [
    "ExclusionMatcher",
    "Printer",
    "SelectionEngine",
    "SelectionReporter",
    "collect_files",
    "read_as_text",
    "resolve",
    "to_display",
]
