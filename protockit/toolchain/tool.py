"""
protoc tool facade.

ProtocTool wires configuration, a tag source and a target platform into the
four operations a version manager asks of a tool: describe itself, list
versions, describe the prebuilt download, and locate executables. All
collaborators are injectable so hosts and tests can run it without network
access.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from protockit.config.parser import ProtocConfig
from protockit.core.interfaces import TagSource
from protockit.core.platform import PlatformKey, detect_platform
from protockit.toolchain.artifacts import TOOL_NAME, ArtifactDescriptor, resolve_artifact
from protockit.toolchain.catalog import VersionCatalog, load_versions
from protockit.toolchain.executables import ExecutableMap, locate_executables
from protockit.toolchain.tags import GitHubTagSource
from protockit.toolchain.versions import Alias, VersionRequest, parse_version_request

logger = logging.getLogger(__name__)

CANARY_ALIAS = "canary"
MINIMUM_HOST_VERSION = "0.42.0"


@dataclass(frozen=True)
class ToolMetadata:
    """Registration metadata reported to the host."""

    name: str
    type: str
    minimum_host_version: str
    plugin_version: str
    config_schema: Dict[str, Any] = field(default_factory=dict)


class ProtocTool:
    """
    Resolve protoc versions, downloads and executables for one platform.

    Example:
        >>> tool = ProtocTool(platform=PlatformKey("linux", "x64"))
        >>> tool.download_prebuilt("28.3.0").filename
        'protoc-28.3-linux-x86_64.zip'
    """

    def __init__(
        self,
        config: Optional[ProtocConfig] = None,
        tag_source: Optional[TagSource] = None,
        platform: Optional[PlatformKey] = None,
    ):
        """
        Initialize the tool.

        Args:
            config: Tool configuration (defaults if None)
            tag_source: Source of upstream tags (GitHub if None)
            platform: Target platform (auto-detected if None)
        """
        self.config = config or ProtocConfig()
        self.tag_source = tag_source or GitHubTagSource()
        self.platform = platform or detect_platform()

    def metadata(self) -> ToolMetadata:
        """Return registration metadata."""
        from protockit import __version__

        return ToolMetadata(
            name=TOOL_NAME,
            type="command-line",
            minimum_host_version=MINIMUM_HOST_VERSION,
            plugin_version=__version__,
            config_schema=ProtocConfig.schema(),
        )

    def load_versions(self) -> VersionCatalog:
        """
        List available versions from the upstream tags.

        Raises:
            TagSourceError: If tags cannot be fetched
            EmptyCatalogError: If no release tags were found
        """
        return load_versions(self.tag_source)

    def download_prebuilt(
        self, version: Union[VersionRequest, str], canary: bool = False
    ) -> ArtifactDescriptor:
        """
        Describe the prebuilt archive for a version on this tool's platform.

        Args:
            version: Exact version, alias, or version string
            canary: Whether the host classified the request as canary; the
                    "canary" alias is always treated as canary

        Raises:
            UnsupportedCanaryError: For canary requests
            UnsupportedPlatformError: If the platform has no prebuilt archive
        """
        if isinstance(version, str):
            version = parse_version_request(version)

        if isinstance(version, Alias) and version.name == CANARY_ALIAS:
            canary = True

        logger.debug(f"Resolving protoc {version} for {self.platform}")

        return resolve_artifact(
            version, self.platform, canary=canary, dist_url=self.config.dist_url
        )

    def locate_executables(self) -> ExecutableMap:
        """Return the executable layout for this tool's platform."""
        return locate_executables(self.platform.os)


__all__ = [
    "CANARY_ALIAS",
    "MINIMUM_HOST_VERSION",
    "ToolMetadata",
    "ProtocTool",
]
