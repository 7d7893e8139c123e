"""
Summary: Accumulate selection outcomes and describe them at the end of a run.
Why: Single-file and recursive paths must report through one consistent ledger.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import final

from codefence.features.selection.domain.models import (
    Excluded,
    Printed,
    SelectionOutcome,
    Skipped,
)
from codefence.platform.logging import logger


@final
@dataclass(slots=True)
class SelectionReporter:
    """Ordered record of everything a run excluded, printed, or skipped.

    Skips are logged as warnings at the moment they are recorded, so every
    skip yields exactly one diagnostic line.
    """

    excluded_paths: list[str] = field(default_factory=list)
    printed_paths: list[str] = field(default_factory=list)
    skipped: list[Skipped] = field(default_factory=list)
    found_any: bool = False

    def record(self, outcome: SelectionOutcome) -> None:
        match outcome:
            case Printed(display_path=display_path):
                self.printed_paths.append(display_path)
                self.found_any = True
            case Excluded(display_path=display_path):
                self.excluded_paths.append(display_path)
            case Skipped():
                self.skipped.append(outcome)
                self._warn(outcome)

    @staticmethod
    def _warn(outcome: Skipped) -> None:
        args: tuple[str, ...] = (outcome.subject,)
        if outcome.detail is not None:
            args += (outcome.detail,)
        logger.warning(
            outcome.reason.template,
            *args,
            extra={
                "selection_event": f"selection.skip.{outcome.reason.value}",
                "subject": outcome.subject,
            },
        )

    def summary_lines(self) -> list[str]:
        """Return the excluded/printed listings shown after all arguments.

        The excluded block appears only when something was excluded; the
        printed block is always present and says ``None`` when empty.
        """
        lines: list[str] = []
        if self.excluded_paths:
            lines.append("Excluded files:")
            lines.extend(self.excluded_paths)

        if self.printed_paths:
            lines.append("Printed files:")
            lines.extend(self.printed_paths)
        else:
            lines.append("Printed files: None")
        return lines

    @staticmethod
    def no_files_message(arguments: Sequence[str]) -> str:
        """Aggregate diagnostic naming every command-line argument."""
        joined = "', '".join(arguments)
        return f"No valid files found among the arguments '{joined}'"


__all__ = ["SelectionReporter"]
