"""
Host platform detection for protockit.

This module provides the OS/architecture vocabulary used when selecting a
prebuilt protoc archive, plus detection of the current host.

Features:
- Operating system detection (Windows, Linux, macOS)
- CPU architecture detection and normalization (x64, ARM64, x86)
- Canonical platform string generation (e.g., 'linux-x64', 'macos-arm64')
- Executable naming convention per OS (e.g., 'protoc.exe' on Windows)
- Fast detection with caching

Usage:
    from protockit.core.platform import detect_platform, get_exe_name

    key = detect_platform()
    print(f"Platform string: {key.platform_string()}")
    print(get_exe_name(key.os, "bin/protoc"))
"""

import functools
import platform
from dataclasses import dataclass

LINUX = "linux"
MACOS = "macos"
WINDOWS = "windows"

X64 = "x64"
ARM64 = "arm64"
X86 = "x86"

KNOWN_OS = (LINUX, MACOS, WINDOWS)
KNOWN_ARCH = (X64, ARM64, X86)


@dataclass(frozen=True)
class PlatformKey:
    """
    Target operating system and CPU architecture pair.

    Attributes:
        os: Operating system ('linux', 'macos', 'windows')
        arch: CPU architecture ('x64', 'arm64', 'x86')
    """

    os: str
    arch: str

    def platform_string(self) -> str:
        """
        Get canonical platform string (e.g., 'linux-x64', 'macos-arm64').

        Example:
            >>> PlatformKey('linux', 'x64').platform_string()
            'linux-x64'
        """
        return f"{self.os}-{self.arch}"

    @classmethod
    def parse(cls, platform_str: str) -> "PlatformKey":
        """
        Build a key from a platform string such as 'windows-x86'.

        Raises:
            ValueError: If the string is not of the form '<os>-<arch>'
        """
        os_name, sep, arch = platform_str.strip().lower().partition("-")
        if not sep or not os_name or not arch:
            raise ValueError(
                f"Invalid platform string: {platform_str!r} (expected '<os>-<arch>')"
            )
        return cls(os=os_name, arch=arch)

    def __str__(self) -> str:
        return self.platform_string()


@functools.lru_cache(maxsize=1)
def detect_platform() -> PlatformKey:
    """
    Detect current host platform.

    This function is cached - it only runs detection once per process.

    Returns:
        PlatformKey for the running interpreter's host
    """
    return PlatformKey(os=_detect_os(), arch=_detect_architecture())


def _detect_os() -> str:
    """
    Detect operating system.

    Returns:
        Normalized OS name: 'windows', 'linux', 'macos', or the lower-cased
        system name for anything else
    """
    system = platform.system().lower()

    if system == "windows":
        return WINDOWS
    elif system == "linux":
        return LINUX
    elif system == "darwin":
        return MACOS
    else:
        return system


def _detect_architecture() -> str:
    """
    Detect CPU architecture.

    Returns:
        Normalized architecture: 'x64', 'arm64', 'x86', or the raw machine name
    """
    machine = platform.machine().lower()

    if machine in ("x86_64", "amd64", "x64"):
        return X64
    elif machine in ("aarch64", "arm64"):
        return ARM64
    elif machine in ("i386", "i686", "x86"):
        return X86
    else:
        return machine


def get_exe_name(os_name: str, name: str) -> str:
    """
    Apply the OS executable suffix convention to a file name or path.

    Example:
        >>> get_exe_name('windows', 'bin/protoc')
        'bin/protoc.exe'
        >>> get_exe_name('linux', 'bin/protoc')
        'bin/protoc'
    """
    if os_name == WINDOWS and not name.lower().endswith(".exe"):
        return f"{name}.exe"
    return name


def clear_platform_cache():
    """
    Clear the platform detection cache.

    This forces the next call to detect_platform() to re-detect.
    """
    detect_platform.cache_clear()


__all__ = [
    "LINUX",
    "MACOS",
    "WINDOWS",
    "X64",
    "ARM64",
    "X86",
    "KNOWN_OS",
    "KNOWN_ARCH",
    "PlatformKey",
    "detect_platform",
    "get_exe_name",
    "clear_platform_cache",
]
