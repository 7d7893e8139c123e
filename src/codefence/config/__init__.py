"""Configuration loading for codefence."""

from codefence.config.config import Config, ConfigError
from codefence.config.paths import default_config_path

__all__ = ["Config", "ConfigError", "default_config_path"]
