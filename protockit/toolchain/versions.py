"""
Version translation between semantic versions and protoc release numbers.

protoc is released under a two-component scheme ("28.3", "22.0-rc1") where
every minor number is its own release line. Version managers expect full
semantic versions, so a patch component is synthesized on the way in and
dropped on the way out:

    >>> from_protoc_version("1.2-rc3")
    CanonicalVersion('1.2.0-rc3')
    >>> to_protoc_version(CanonicalVersion(1, 2, 3))
    '1.2'

The pair is intentionally lossy: round-tripping is only the identity when
the patch component is 0.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from protockit.core.exceptions import MalformedVersionError

_NUMBER_RE = re.compile(r"^[0-9]+$")
_PRERELEASE_RE = re.compile(r"^[0-9A-Za-z-]+(\.[0-9A-Za-z-]+)*$")
_SEMVER_RE = re.compile(
    r"^v?(?P<major>[0-9]+)\.(?P<minor>[0-9]+)\.(?P<patch>[0-9]+)"
    r"(?:-(?P<pre>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?$"
)
_ALIAS_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_.-]*$")


@dataclass(frozen=True, eq=True)
class CanonicalVersion:
    """
    Fully specified major.minor.patch version with optional prerelease.

    Ordering is lexicographic on (major, minor, patch); a prerelease sorts
    below the release with the same numbers, and prereleases of the same
    numbers compare identifier by identifier (numeric identifiers numerically
    and below alphanumeric ones).

    Example:
        >>> CanonicalVersion(28, 3, 0, "rc1") < CanonicalVersion(28, 3, 0)
        True
    """

    major: int
    minor: int
    patch: int = 0
    prerelease: Optional[str] = None

    def __post_init__(self):
        """Validate components after initialization."""
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise MalformedVersionError(
                    str(value), f"{name} must be a non-negative integer"
                )
        if self.prerelease is not None and not _PRERELEASE_RE.match(self.prerelease):
            raise MalformedVersionError(
                self.prerelease, "invalid prerelease identifier"
            )

    @classmethod
    def parse(cls, text: str) -> "CanonicalVersion":
        """
        Parse a strict semantic version ("1.2.3", "v1.2.0-rc3").

        Raises:
            MalformedVersionError: If the text is not a full semantic version
        """
        match = _SEMVER_RE.match(text.strip())
        if not match:
            raise MalformedVersionError(text, "expected major.minor.patch[-pre]")
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            prerelease=match.group("pre"),
        )

    @property
    def is_prerelease(self) -> bool:
        return self.prerelease is not None

    def _sort_key(self) -> Tuple:
        if self.prerelease is None:
            return (self.major, self.minor, self.patch, 1, ())
        identifiers = tuple(
            (0, int(part), "") if part.isdigit() else (1, 0, part)
            for part in self.prerelease.split(".")
        )
        return (self.major, self.minor, self.patch, 0, identifiers)

    def __lt__(self, other: "CanonicalVersion") -> bool:
        if not isinstance(other, CanonicalVersion):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: "CanonicalVersion") -> bool:
        if not isinstance(other, CanonicalVersion):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: "CanonicalVersion") -> bool:
        if not isinstance(other, CanonicalVersion):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: "CanonicalVersion") -> bool:
        if not isinstance(other, CanonicalVersion):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def __str__(self) -> str:
        base = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease is not None:
            return f"{base}-{self.prerelease}"
        return base

    def __repr__(self) -> str:
        return f"CanonicalVersion('{self}')"


@dataclass(frozen=True)
class Alias:
    """Opaque version label such as "latest" or "canary", resolved by the host."""

    name: str

    def __str__(self) -> str:
        return self.name


VersionRequest = Union[CanonicalVersion, Alias]


def parse_version_request(text: str) -> VersionRequest:
    """
    Parse user input into an exact version or an alias.

    Args:
        text: "28.3.0", "v1.2.0-rc3", "latest", ...

    Returns:
        CanonicalVersion for full semantic versions, Alias for bare labels

    Raises:
        MalformedVersionError: If the text is neither

    Example:
        >>> parse_version_request("latest")
        Alias(name='latest')
    """
    text = text.strip()
    if _SEMVER_RE.match(text):
        return CanonicalVersion.parse(text)
    if _ALIAS_RE.match(text):
        return Alias(text)
    raise MalformedVersionError(text, "expected a semantic version or an alias")


def from_protoc_version(version: str) -> CanonicalVersion:
    """
    Convert a protoc release number to a canonical semantic version.

    Zero releases don't end in ".0", so the missing components are padded:
    "1.2" becomes 1.2.0 and "1" becomes 1.0.0. Anything after the first
    hyphen is the prerelease label and is reattached after padding.

    Args:
        version: Release number with the leading "v" already stripped

    Returns:
        Canonical version

    Raises:
        MalformedVersionError: If the numeric part is not 1-3 non-negative integers
    """
    base, sep, prerelease = version.partition("-")
    if sep and not prerelease:
        raise MalformedVersionError(version, "empty prerelease label")

    parts = base.split(".")
    if len(parts) > 3:
        raise MalformedVersionError(version, "too many components")
    if not all(_NUMBER_RE.match(part) for part in parts):
        raise MalformedVersionError(version, "components must be non-negative integers")

    numbers = [int(part) for part in parts]
    numbers.extend([0] * (3 - len(numbers)))

    return CanonicalVersion(
        major=numbers[0],
        minor=numbers[1],
        patch=numbers[2],
        prerelease=prerelease if sep else None,
    )


def to_protoc_version(version: Union[VersionRequest, str]) -> str:
    """
    Convert a version request to protoc's native release number.

    Aliases pass through untouched. Exact versions lose their patch
    component, since protoc has none: 1.2.3 becomes "1.2" and 1.2.0-rc3
    becomes "1.2-rc3".

    Args:
        version: CanonicalVersion, Alias, or a string accepted by
                 parse_version_request()

    Returns:
        Native version string
    """
    if isinstance(version, str):
        version = parse_version_request(version)

    if isinstance(version, Alias):
        return version.name

    if version.prerelease is None:
        return f"{version.major}.{version.minor}"
    return f"{version.major}.{version.minor}-{version.prerelease}"


__all__ = [
    "CanonicalVersion",
    "Alias",
    "VersionRequest",
    "parse_version_request",
    "from_protoc_version",
    "to_protoc_version",
]
