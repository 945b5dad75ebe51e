"""Configuration module for protockit.

This module provides parsing and validation of the protoc tool configuration.
"""

from protockit.config.parser import (
    DEFAULT_DIST_URL,
    ProtocConfig,
    load_config,
)
from protockit.core.exceptions import ConfigError

__all__ = [
    "DEFAULT_DIST_URL",
    "ProtocConfig",
    "ConfigError",
    "load_config",
]
