"""
Summary: Read a file and classify its bytes as UTF-8 text or binary.
Why: Binary content is reported and skipped instead of printed.
"""

from __future__ import annotations

from pathlib import Path

TEXT_ENCODING = "utf-8"


def read_as_text(path: Path) -> str | None:
    """Return the decoded contents of ``path``, or ``None`` for binary data.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    with open(path, "rb") as f:
        data = f.read()
    try:
        return data.decode(TEXT_ENCODING)
    except UnicodeDecodeError:
        return None


__all__ = ["TEXT_ENCODING", "read_as_text"]
