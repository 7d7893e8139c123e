"""
Summary: Decide whether a canonical path is excluded by user patterns.
Why: Directory pruning and file arguments must share one matching rule.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import final

from .path_resolver import resolve


@final
@dataclass(frozen=True, slots=True)
class ExclusionMatcher:
    """Substring matcher over canonicalized exclusion patterns.

    A candidate is excluded when the canonical string of any pattern appears
    anywhere in the candidate's canonical string. Matching is not aware of
    path segments: a pattern resolving to ``/work/src`` also excludes
    ``/work/src_old/file.py``.
    """

    patterns: tuple[str, ...] = ()

    @classmethod
    def from_patterns(cls, raw_patterns: Iterable[str], cwd: Path) -> "ExclusionMatcher":
        """Canonicalize each raw pattern once for the whole run."""
        return cls(tuple(str(resolve(pattern, cwd)) for pattern in raw_patterns))

    def is_excluded(self, canonical: Path) -> bool:
        if not self.patterns:
            return False
        candidate = str(canonical)
        return any(pattern in candidate for pattern in self.patterns)


__all__ = ["ExclusionMatcher"]
