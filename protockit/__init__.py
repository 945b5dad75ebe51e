"""
protockit - protoc version and prebuilt artifact resolution.

Translates between semantic versions and protoc release numbers, builds the
version catalog from upstream tags, and resolves the prebuilt archive and
executable layout for a platform.
"""

try:
    from importlib.metadata import version

    __version__ = version("protockit")
except Exception:
    __version__ = "0.1.0"

from protockit.core.exceptions import (  # noqa: E402
    ProtocKitError,
    UnsupportedPlatformError,
    UnsupportedCanaryError,
    MalformedVersionError,
    EmptyCatalogError,
    TagSourceError,
    ConfigError,
)
from protockit.core.platform import PlatformKey, detect_platform  # noqa: E402
from protockit.config.parser import ProtocConfig, load_config  # noqa: E402
from protockit.toolchain.versions import (  # noqa: E402
    CanonicalVersion,
    Alias,
    from_protoc_version,
    to_protoc_version,
)
from protockit.toolchain.artifacts import ArtifactDescriptor, resolve_artifact  # noqa: E402
from protockit.toolchain.catalog import (  # noqa: E402
    VersionCatalog,
    build_catalog,
    latest_alias,
)
from protockit.toolchain.executables import ExecutableMap, locate_executables  # noqa: E402
from protockit.toolchain.tool import ProtocTool  # noqa: E402

__all__ = [
    "__version__",
    "ProtocKitError",
    "UnsupportedPlatformError",
    "UnsupportedCanaryError",
    "MalformedVersionError",
    "EmptyCatalogError",
    "TagSourceError",
    "ConfigError",
    "PlatformKey",
    "detect_platform",
    "ProtocConfig",
    "load_config",
    "CanonicalVersion",
    "Alias",
    "from_protoc_version",
    "to_protoc_version",
    "ArtifactDescriptor",
    "resolve_artifact",
    "VersionCatalog",
    "build_catalog",
    "latest_alias",
    "ExecutableMap",
    "locate_executables",
    "ProtocTool",
]
