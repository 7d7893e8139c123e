"""src/codefence/ui/cli/display/fence.py
What: Write file contents wrapped in a fenced block headed by the display path.
Why: Keep the printed-content stream free of any diagnostic output.
"""

from __future__ import annotations

import sys
from typing import TextIO, final

FENCE = "```"


@final
class FencePrinter:
    """Writes fenced code blocks to standard output (or a given stream)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialize the printer.

        Args:
            stream: Target stream. Defaults to the current ``sys.stdout``.
        """
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def __call__(self, display_path: str, contents: str) -> None:
        """Print one block: fence, ``// path`` header, raw contents, fence, blank line.

        Contents are written untouched, so a file without a trailing newline
        ends up with the closing fence on its last line.
        """
        out = self.stream
        _ = out.write(f"{FENCE}\n")
        _ = out.write(f"// {display_path}\n")
        _ = out.write(contents)
        _ = out.write(f"{FENCE}\n")
        _ = out.write("\n")
        out.flush()
