"""Configuration management for codefence."""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from codefence.config.paths import default_config_path
from codefence.platform.logging import logger


class ConfigError(ValueError):
    """Raised when the configuration file cannot be parsed or validated."""


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """User defaults applied beneath the command-line flags."""

    # Display absolute paths instead of working-directory-relative ones
    absolute: bool = False

    # Descend into directory arguments
    recursive: bool = False

    # Exclusion patterns applied before any given on the command line
    exclude: list[str] = field(default_factory=list)

    # Exit with status 1 when no file was printed
    fail_on_empty: bool = True

    # Log file path (optional); console-only logging when unset
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

    @classmethod
    def from_mapping(cls, raw: dict[str, Any]) -> "Config":
        """Build a validated configuration from a parsed TOML table.

        Raises:
            ConfigError: If a key is unknown or a value has the wrong type.
        """
        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(raw) - set(known))
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        for key in ("absolute", "recursive", "fail_on_empty"):
            if key in raw and not isinstance(raw[key], bool):
                raise ConfigError(f"'{key}' must be true or false")

        exclude = raw.get("exclude", [])
        if not isinstance(exclude, list) or not all(isinstance(item, str) for item in exclude):
            raise ConfigError("'exclude' must be a list of strings")

        log_file = raw.get("log_file")
        if log_file is not None and not isinstance(log_file, str):
            raise ConfigError("'log_file' must be a string path")

        return cls(**{**raw, "exclude": list(exclude)})

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        Args:
            config_file: Explicit file to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration, or defaults when the file is absent.

        Raises:
            ConfigError: If the file exists but is not valid configuration.
        """
        if cls._instance is not None and config_file in (None, cls._loaded_from):
            return cls._instance

        target = config_file or default_config_path()

        if target.is_file():
            try:
                with open(target, "rb") as f:
                    raw = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"Invalid configuration file {target}: {e}") from e
            instance = cls.from_mapping(raw)
            logger.debug("Configuration loaded from %s", target)
        else:
            instance = cls()
            logger.debug("No configuration file at %s, using defaults", target)

        cls._instance = instance
        cls._loaded_from = target
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` reads the file again."""
        cls._instance = None
        cls._loaded_from = None
