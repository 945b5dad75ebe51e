"""
Prebuilt protoc archive resolution.

protoc publishes one zip archive per supported platform on each GitHub
release. This module owns the support matrix, the archive naming table and
the download URL templating.

Example:
    >>> from protockit.core.platform import PlatformKey
    >>> artifact = resolve_artifact("1.41.0", PlatformKey("linux", "arm64"))
    >>> artifact.filename
    'protoc-1.41-linux-aarch_64.zip'
"""

import logging
from dataclasses import dataclass
from typing import Dict, Tuple, Union

from protockit.config.parser import DEFAULT_DIST_URL, FILE_TOKEN, VERSION_TOKEN
from protockit.core.exceptions import UnsupportedCanaryError, UnsupportedPlatformError
from protockit.core.platform import ARM64, LINUX, MACOS, WINDOWS, X64, X86, PlatformKey
from protockit.toolchain.versions import (
    VersionRequest,
    to_protoc_version,
)

logger = logging.getLogger(__name__)

TOOL_NAME = "Protoc"

ARCHIVE_EXTENSION = ".zip"

SUPPORTED_PLATFORMS: Dict[str, Tuple[str, ...]] = {
    LINUX: (X64, ARM64),
    MACOS: (X64, ARM64),
    WINDOWS: (X64, X86),
}

# Archive stem per (os, arch); {version} is the native protoc version.
ARCHIVE_NAMES: Dict[Tuple[str, str], str] = {
    (LINUX, ARM64): "protoc-{version}-linux-aarch_64",
    (LINUX, X64): "protoc-{version}-linux-x86_64",
    (MACOS, ARM64): "protoc-{version}-osx-aarch_64",
    (MACOS, X64): "protoc-{version}-osx-x86_64",
    (WINDOWS, X64): "protoc-{version}-win64",
    (WINDOWS, X86): "protoc-{version}-win32",
}


@dataclass(frozen=True)
class ArtifactDescriptor:
    """Download information for one prebuilt archive."""

    filename: str
    """Archive file name (e.g., protoc-28.3-linux-x86_64.zip)"""

    download_url: str
    """Fully-qualified URL of the archive"""


def is_supported(platform: PlatformKey) -> bool:
    """Check whether a prebuilt archive exists for the platform."""
    return platform.arch in SUPPORTED_PLATFORMS.get(platform.os, ())


def check_supported_platform(platform: PlatformKey, tool: str = TOOL_NAME) -> None:
    """
    Verify the platform is in the support matrix.

    Raises:
        UnsupportedPlatformError: With both the OS and architecture when the
            pair is not supported, or just the OS when the OS is unknown
    """
    if platform.os not in SUPPORTED_PLATFORMS:
        raise UnsupportedPlatformError(tool, platform.os)
    if platform.arch not in SUPPORTED_PLATFORMS[platform.os]:
        raise UnsupportedPlatformError(tool, platform.os, platform.arch)


def archive_name(native_version: str, platform: PlatformKey) -> str:
    """
    Build the archive file name for a native version on a platform.

    Args:
        native_version: protoc release number (e.g., "28.3")
        platform: Target platform; must be in the support matrix

    Returns:
        File name including the .zip extension
    """
    check_supported_platform(platform)
    stem = ARCHIVE_NAMES[(platform.os, platform.arch)].format(version=native_version)
    return f"{stem}{ARCHIVE_EXTENSION}"


def render_download_url(dist_url: str, native_version: str, filename: str) -> str:
    """Substitute {version} and {file} in a download URL template."""
    return dist_url.replace(VERSION_TOKEN, native_version).replace(
        FILE_TOKEN, filename
    )


def resolve_artifact(
    version: Union[VersionRequest, str],
    platform: PlatformKey,
    canary: bool = False,
    dist_url: str = DEFAULT_DIST_URL,
) -> ArtifactDescriptor:
    """
    Resolve the prebuilt archive for a version and platform.

    Args:
        version: Exact version, alias, or version string
        platform: Target OS/architecture pair
        canary: Whether the host classified the request as a canary build
        dist_url: Download URL template with {version} and {file} placeholders

    Returns:
        ArtifactDescriptor with file name and download URL

    Raises:
        UnsupportedCanaryError: If canary is set
        UnsupportedPlatformError: If the platform is not in the support matrix
    """
    if canary:
        raise UnsupportedCanaryError(TOOL_NAME)

    check_supported_platform(platform)

    native = to_protoc_version(version)
    filename = archive_name(native, platform)
    download_url = render_download_url(dist_url, native, filename)

    logger.debug(f"Resolved protoc {native} for {platform}: {download_url}")

    return ArtifactDescriptor(filename=filename, download_url=download_url)


__all__ = [
    "TOOL_NAME",
    "SUPPORTED_PLATFORMS",
    "ARCHIVE_NAMES",
    "ArtifactDescriptor",
    "is_supported",
    "check_supported_platform",
    "archive_name",
    "render_download_url",
    "resolve_artifact",
]
