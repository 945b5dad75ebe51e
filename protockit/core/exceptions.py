"""
Centralized exception hierarchy for protockit.

This module defines all custom exceptions used across the codebase
so callers at the host boundary can present typed, descriptive failures.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class ProtocKitError(Exception):
    """Base exception for all protockit errors."""

    pass


# ============================================================================
# Resolution Exceptions
# ============================================================================


class UnsupportedPlatformError(ProtocKitError):
    """Raised when an OS/architecture pair has no prebuilt archive."""

    def __init__(self, tool: str, os: str, arch: str = ""):
        self.tool = tool
        self.os = os
        self.arch = arch
        if arch:
            msg = f"Unable to install {tool}, unsupported architecture {arch} for {os}."
        else:
            msg = f"Unable to install {tool}, unsupported OS {os}."
        super().__init__(msg)


class UnsupportedCanaryError(ProtocKitError):
    """Raised when a canary build is requested as a prebuilt download."""

    def __init__(self, tool: str):
        self.tool = tool
        super().__init__(f"Unable to install {tool}, canary builds are not supported.")


# ============================================================================
# Version Exceptions
# ============================================================================


class MalformedVersionError(ProtocKitError):
    """Version string does not parse as a protoc or semantic version."""

    def __init__(self, version: str, reason: str = ""):
        self.version = version
        self.reason = reason
        msg = f"Malformed version: {version!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class EmptyCatalogError(ProtocKitError):
    """Raised when no release tags survive catalog filtering."""

    pass


class TagSourceError(ProtocKitError):
    """Raised when the remote tag list cannot be fetched."""

    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigError(ProtocKitError):
    """Configuration parsing or validation error."""

    pass
