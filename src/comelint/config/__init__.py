"""Configuration loading and schema."""

from comelint.config.loader import ConfigError, load_config
from comelint.config.schema import ComelintConfig, OutputConfig, ValidationConfig

__all__ = [
    "ComelintConfig",
    "ConfigError",
    "OutputConfig",
    "ValidationConfig",
    "load_config",
]
