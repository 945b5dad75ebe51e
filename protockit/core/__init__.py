"""
Core functionality for protockit.

This package contains the foundational modules that other components depend on.
"""

from .platform import (
    PlatformKey,
    detect_platform,
    get_exe_name,
    clear_platform_cache,
)

from .interfaces import (
    TagSource,
)

from .exceptions import (
    ProtocKitError,
    UnsupportedPlatformError,
    UnsupportedCanaryError,
    MalformedVersionError,
    EmptyCatalogError,
    TagSourceError,
    ConfigError,
)

__all__ = [
    # Platform
    "PlatformKey",
    "detect_platform",
    "get_exe_name",
    "clear_platform_cache",
    # Interfaces
    "TagSource",
    # Exceptions
    "ProtocKitError",
    "UnsupportedPlatformError",
    "UnsupportedCanaryError",
    "MalformedVersionError",
    "EmptyCatalogError",
    "TagSourceError",
    "ConfigError",
]
