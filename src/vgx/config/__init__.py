"""Configuration loading, schema, and defaults."""

from vgx.config.loader import ConfigError, load_config
from vgx.config.schema import VgxConfig, threshold_from_percent

__all__ = [
    "ConfigError",
    "VgxConfig",
    "load_config",
    "threshold_from_percent",
]
