"""
Version catalog built from upstream source-control tags.

The protobuf repository carries many tag shapes (language runtimes,
three-component patch tags, betas). Only bare two-component release tags
such as "v28.3" or "v22.0-rc1" name a protoc release line, so everything
else is filtered out before translation.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Tuple

from protockit.core.exceptions import EmptyCatalogError, MalformedVersionError
from protockit.core.interfaces import TagSource
from protockit.toolchain.versions import CanonicalVersion, from_protoc_version

logger = logging.getLogger(__name__)

LATEST_ALIAS = "latest"


@dataclass(frozen=True)
class VersionCatalog:
    """Available protoc versions with the derived aliases."""

    versions: Tuple[CanonicalVersion, ...]
    """Unique versions, sorted ascending"""

    latest: Optional[CanonicalVersion] = None
    """Highest available version"""

    aliases: Dict[str, CanonicalVersion] = field(default_factory=dict)
    """Alias name to version (always includes "latest" when non-empty)"""


def is_release_tag(tag: str) -> bool:
    """
    Check whether a raw tag names a two-component release.

    One leading "v" is stripped, then the part before any prerelease
    suffix must contain exactly one dot.

    Example:
        >>> is_release_tag("v28.3")
        True
        >>> is_release_tag("v3.20.1")
        False
    """
    name = tag[1:] if tag.startswith("v") else tag
    base = name.split("-", 1)[0]
    return base.count(".") == 1


def build_catalog(raw_tags: Iterable[str]) -> Tuple[CanonicalVersion, ...]:
    """
    Filter raw tags to release tags and translate them to canonical versions.

    Tags that look like releases but fail to parse are skipped, so one bad
    tag never aborts the whole load.

    Args:
        raw_tags: Tag names as reported upstream (e.g., "v28.3")

    Returns:
        Unique canonical versions, sorted ascending
    """
    versions = set()

    for tag in raw_tags:
        tag = tag.strip()
        if not is_release_tag(tag):
            continue

        name = tag[1:] if tag.startswith("v") else tag
        try:
            versions.add(from_protoc_version(name))
        except MalformedVersionError as e:
            logger.debug(f"Skipping tag {tag!r}: {e}")

    return tuple(sorted(versions))


def latest_alias(catalog: Iterable[CanonicalVersion]) -> CanonicalVersion:
    """
    Get the highest version in a catalog.

    Raises:
        EmptyCatalogError: If the catalog is empty
    """
    versions = list(catalog)
    if not versions:
        raise EmptyCatalogError("No protoc versions available")
    return max(versions)


def load_versions(source: TagSource) -> VersionCatalog:
    """
    Fetch tags from a source and build the version catalog.

    Args:
        source: Collaborator that lists upstream tags

    Returns:
        VersionCatalog with versions, latest, and the "latest" alias

    Raises:
        TagSourceError: If the source cannot list tags
        EmptyCatalogError: If no release tags were found
    """
    tags = source.fetch_tags()
    versions = build_catalog(tags)
    latest = latest_alias(versions)

    logger.info(
        f"Loaded {len(versions)} protoc versions from {len(tags)} tags "
        f"(latest: {latest})"
    )

    return VersionCatalog(
        versions=versions, latest=latest, aliases={LATEST_ALIAS: latest}
    )


__all__ = [
    "LATEST_ALIAS",
    "VersionCatalog",
    "is_release_tag",
    "build_catalog",
    "latest_alias",
    "load_versions",
]
