"""codefence - print files as fenced code blocks labelled with their paths."""

__version__ = "0.1.0"
