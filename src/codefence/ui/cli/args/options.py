"""Command line argument options."""

from dataclasses import dataclass, field
from typing import final


@final
@dataclass(slots=True)
class SelectArgs:
    """Command line arguments merged with configured defaults."""

    paths: list[str]
    absolute: bool = False
    recursive: bool = False
    exclude: list[str] = field(default_factory=list)
    fail_on_empty: bool = True


__all__ = ["SelectArgs"]
