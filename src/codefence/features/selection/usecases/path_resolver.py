"""
Summary: Canonicalize user-supplied paths and derive their display form.
Why: Exclusion, traversal, and reporting must all agree on one path identity.
"""

from __future__ import annotations

import os
from pathlib import Path

from codefence.features.selection.domain.models import DisplayMode


def resolve(path: str | os.PathLike[str], cwd: Path) -> Path:
    """Return the canonical form of ``path``.

    Relative paths are anchored at ``cwd`` (the directory captured when the run
    started) rather than the live process working directory. Existing paths are
    made absolute with ``.``/``..`` and symlinks resolved. When that fails, for
    example because the path does not exist, the unverified join of ``cwd`` and
    ``path`` is returned instead.

    Args:
        path: Any path string; it need not exist.
        cwd: Working directory captured at the start of the run.

    Returns:
        Path: Canonical path, or the best-effort absolute join.
    """
    joined = cwd / path
    try:
        return joined.resolve(strict=True)
    except (OSError, RuntimeError):
        return joined


def to_display(canonical: Path, mode: DisplayMode, cwd: Path) -> Path:
    """Return the path shown to the user for ``canonical``.

    In relative mode the ``cwd`` prefix is stripped; paths outside ``cwd`` are
    returned unchanged.
    """
    if mode is DisplayMode.ABSOLUTE:
        return canonical
    try:
        return canonical.relative_to(cwd)
    except ValueError:
        return canonical


__all__ = ["resolve", "to_display"]
