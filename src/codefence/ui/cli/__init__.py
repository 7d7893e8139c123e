"""Command line interface package."""

from codefence.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
