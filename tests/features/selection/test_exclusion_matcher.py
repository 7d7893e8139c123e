"""Tests for substring-based exclusion matching."""

from __future__ import annotations

from pathlib import Path

from codefence.features.selection import ExclusionMatcher


def test_empty_matcher_excludes_nothing() -> None:
    matcher = ExclusionMatcher()

    assert not matcher.is_excluded(Path("/any/path"))


def test_matching_is_plain_substring_containment() -> None:
    """A bare pattern hits file names and directory names alike."""

    matcher = ExclusionMatcher(("secret",))

    assert matcher.is_excluded(Path("/tmp/secret.txt"))
    assert matcher.is_excluded(Path("/tmp/mysecretdir/file.txt"))
    assert not matcher.is_excluded(Path("/tmp/public/file.txt"))


def test_from_patterns_canonicalizes_relative_patterns(workdir: Path) -> None:
    (workdir / "dir" / "skip").mkdir(parents=True)

    matcher = ExclusionMatcher.from_patterns(["dir/skip", "./build"], workdir)

    assert matcher.patterns == (str(workdir / "dir" / "skip"), str(workdir / "build"))
    assert matcher.is_excluded(workdir / "dir" / "skip" / "a.txt")
    assert matcher.is_excluded(workdir / "build" / "out.o")
    assert not matcher.is_excluded(workdir / "dir" / "keep" / "a.txt")


def test_pattern_is_not_segment_aware(workdir: Path) -> None:
    """A resolved pattern also matches siblings that share its prefix."""

    matcher = ExclusionMatcher.from_patterns(["src"], workdir)

    assert matcher.is_excluded(workdir / "src" / "main.py")
    assert matcher.is_excluded(workdir / "src_old" / "main.py")
    assert not matcher.is_excluded(workdir / "lib" / "src.py")
