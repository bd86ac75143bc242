"""Configuration loading, schema, and defaults."""

from gitparse.config.loader import ConfigError, load_config
from gitparse.config.schema import GitParseConfig

__all__ = [
    "ConfigError",
    "GitParseConfig",
    "load_config",
]
