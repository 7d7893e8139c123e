"""
Summary: Enumerate the regular files beneath a directory, pruning excluded subtrees.
Why: Recursive selection needs an order-preserving walk that survives symlink cycles.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from codefence.platform.logging import logger

from .exclusion import ExclusionMatcher
from .path_resolver import resolve

WalkErrorHandler = Callable[[Path, OSError], None]


def collect_files(
    directory: str | Path,
    matcher: ExclusionMatcher,
    cwd: Path,
    on_error: WalkErrorHandler | None = None,
) -> list[Path]:
    """Collect canonical paths of regular files under ``directory``.

    Children are visited depth-first in the order the filesystem lists them
    (not sorted). Any entry whose canonical path is excluded is skipped
    together with its whole subtree. Each canonical directory is entered at
    most once per call, so symlink cycles terminate. No state is kept between
    calls.

    Args:
        directory: Root to walk; a regular file yields itself.
        matcher: Exclusion patterns for this run.
        cwd: Working directory captured at the start of the run.
        on_error: Called with the entry and the error when inspecting or
            listing it fails; the walk then continues with the next entry.
            When omitted the error propagates.

    Returns:
        list[Path]: Canonical file paths in traversal order.
    """
    files: list[Path] = []
    visited: set[Path] = set()
    pending: list[Path] = [Path(directory)]

    while pending:
        canonical = resolve(pending.pop(), cwd)

        if matcher.is_excluded(canonical):
            logger.debug("Pruned excluded path %s", canonical)
            continue

        try:
            is_file = canonical.is_file()
            is_dir = not is_file and canonical.is_dir()
        except OSError as e:
            if on_error is None:
                raise
            on_error(canonical, e)
            continue

        if is_file:
            files.append(canonical)
            continue

        if not is_dir:
            logger.debug("Ignoring %s: not a regular file or directory", canonical)
            continue

        if canonical in visited:
            logger.debug("Already visited %s, not descending again", canonical)
            continue
        visited.add(canonical)

        try:
            children = list(canonical.iterdir())
        except OSError as e:
            if on_error is None:
                raise
            on_error(canonical, e)
            continue

        # Reversed so the first listed child is popped first.
        pending.extend(reversed(children))

    return files


__all__ = ["WalkErrorHandler", "collect_files"]
