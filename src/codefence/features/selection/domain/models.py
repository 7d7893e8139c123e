"""
Summary: Value types describing one selection run and its per-file outcomes.
Why: Keep run context and outcomes immutable so every layer agrees on them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import final


class DisplayMode(Enum):
    """How selected paths are shown to the user."""

    ABSOLUTE = "absolute"
    RELATIVE = "relative"

    @classmethod
    def from_flag(cls, absolute: bool) -> "DisplayMode":
        return cls.ABSOLUTE if absolute else cls.RELATIVE


class SkipReason(Enum):
    """Why a candidate was not printed."""

    NOT_A_FILE = "not-a-file"
    IS_DIRECTORY = "is-directory"
    IS_SYMLINK = "is-symlink"
    NOT_TEXT = "not-text"
    DOES_NOT_EXIST = "does-not-exist"
    UNREADABLE = "unreadable"
    DUPLICATE = "duplicate"

    @property
    def template(self) -> str:
        """Warning message template; ``%s`` is the subject path."""
        return _SKIP_TEMPLATES[self]


_SKIP_TEMPLATES: dict[SkipReason, str] = {
    SkipReason.NOT_A_FILE: "%s is not a file",
    SkipReason.IS_DIRECTORY: "%s is a directory (use --recursive to process directories)",
    SkipReason.IS_SYMLINK: "%s is a symlink",
    SkipReason.NOT_TEXT: "%s is not a text file, skipping.",
    SkipReason.DOES_NOT_EXIST: "%s does not exist",
    SkipReason.UNREADABLE: "%s could not be read (%s)",
    SkipReason.DUPLICATE: "%s was already printed, skipping.",
}


@final
@dataclass(frozen=True, slots=True)
class SelectionContext:
    """Run-wide settings captured once when a run starts.

    ``cwd`` is read a single time so display paths never change mid-run,
    even if the process working directory does.
    """

    cwd: Path
    display_mode: DisplayMode = DisplayMode.RELATIVE
    recursive: bool = False

    @classmethod
    def capture(cls, *, absolute: bool = False, recursive: bool = False) -> "SelectionContext":
        return cls(
            cwd=Path.cwd(),
            display_mode=DisplayMode.from_flag(absolute),
            recursive=recursive,
        )


@final
@dataclass(frozen=True, slots=True)
class Printed:
    """A file whose contents were handed to the printer."""

    display_path: str


@final
@dataclass(frozen=True, slots=True)
class Excluded:
    """A file argument suppressed by an exclusion pattern."""

    display_path: str


@final
@dataclass(frozen=True, slots=True)
class Skipped:
    """A candidate that was reported and not printed.

    ``subject`` is the raw argument for top-level checks (directory, symlink,
    missing, not-a-file) and the display path once a file has been resolved.
    """

    subject: str
    reason: SkipReason
    detail: str | None = None


SelectionOutcome = Printed | Excluded | Skipped
