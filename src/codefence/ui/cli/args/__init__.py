"""Command line argument handling package."""

from codefence.ui.cli.args.parser import ArgumentParser
from codefence.ui.cli.args.options import SelectArgs

__all__ = ["ArgumentParser", "SelectArgs"]
