"""
Toolchain resolution module for protockit.

This module provides functionality for:
- Translating between semantic versions and protoc release numbers
- Building the version catalog from upstream tags
- Resolving prebuilt archive names and download URLs
- Locating executables inside an installed archive
"""

from protockit.toolchain.versions import (
    CanonicalVersion,
    Alias,
    VersionRequest,
    parse_version_request,
    from_protoc_version,
    to_protoc_version,
)
from protockit.toolchain.artifacts import (
    TOOL_NAME,
    SUPPORTED_PLATFORMS,
    ArtifactDescriptor,
    is_supported,
    check_supported_platform,
    archive_name,
    resolve_artifact,
)
from protockit.toolchain.catalog import (
    LATEST_ALIAS,
    VersionCatalog,
    is_release_tag,
    build_catalog,
    latest_alias,
    load_versions,
)
from protockit.toolchain.executables import (
    ExecutableConfig,
    ExecutableMap,
    locate_executables,
)
from protockit.toolchain.tags import (
    StaticTagSource,
    GitHubTagSource,
)
from protockit.toolchain.tool import (
    ToolMetadata,
    ProtocTool,
)

__all__ = [
    # Versions
    "CanonicalVersion",
    "Alias",
    "VersionRequest",
    "parse_version_request",
    "from_protoc_version",
    "to_protoc_version",
    # Artifacts
    "TOOL_NAME",
    "SUPPORTED_PLATFORMS",
    "ArtifactDescriptor",
    "is_supported",
    "check_supported_platform",
    "archive_name",
    "resolve_artifact",
    # Catalog
    "LATEST_ALIAS",
    "VersionCatalog",
    "is_release_tag",
    "build_catalog",
    "latest_alias",
    "load_versions",
    # Executables
    "ExecutableConfig",
    "ExecutableMap",
    "locate_executables",
    # Tag sources
    "StaticTagSource",
    "GitHubTagSource",
    # Facade
    "ToolMetadata",
    "ProtocTool",
]
