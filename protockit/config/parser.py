"""YAML configuration parser for protockit.

This module provides parsing and validation for the protoc tool configuration.
The only recognized option is ``dist-url``, a download URL template.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from protockit.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_DIST_URL = (
    "https://github.com/protocolbuffers/protobuf/releases/download/v{version}/{file}"
)

VERSION_TOKEN = "{version}"
FILE_TOKEN = "{file}"


@dataclass(frozen=True)
class ProtocConfig:
    """Configuration for the protoc tool."""

    dist_url: str = DEFAULT_DIST_URL
    """URL template with {version} and {file} placeholders"""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ProtocConfig":
        """
        Build configuration from a mapping of kebab-case keys.

        Args:
            data: Mapping such as ``{"dist-url": "https://mirror/{version}/{file}"}``.
                  None or an empty mapping yields the defaults.

        Returns:
            Validated configuration

        Raises:
            ConfigError: If the mapping has unknown keys or wrong value types
        """
        if data is None:
            return cls()

        if not isinstance(data, dict):
            raise ConfigError(
                f"Configuration must be a mapping, got {type(data).__name__}"
            )

        unknown = sorted(str(key) for key in data if key != "dist-url")
        if unknown:
            raise ConfigError(
                f"Unknown configuration field(s): {', '.join(unknown)} "
                f"(expected: dist-url)"
            )

        dist_url = data.get("dist-url", DEFAULT_DIST_URL)
        if not isinstance(dist_url, str) or not dist_url.strip():
            raise ConfigError("dist-url must be a non-empty string")

        _check_template(dist_url)

        return cls(dist_url=dist_url)

    def to_dict(self) -> Dict[str, str]:
        """Serialize using the same kebab-case keys accepted by from_dict()."""
        return {"dist-url": self.dist_url}

    @staticmethod
    def schema() -> Dict[str, Any]:
        """
        Describe the accepted options for a host config schema.

        Returns:
            Mapping of option name to its type, default and description
        """
        return {
            "dist-url": {
                "type": "string",
                "default": DEFAULT_DIST_URL,
                "description": (
                    "Download URL template. {version} is replaced with the "
                    "protoc version and {file} with the archive name."
                ),
            }
        }


def _check_template(dist_url: str) -> None:
    """Warn when a URL template lacks one of the substitution tokens."""
    for token in (VERSION_TOKEN, FILE_TOKEN):
        if token not in dist_url:
            logger.warning(f"dist-url has no {token} placeholder: {dist_url}")


def load_config(config_path: Path) -> ProtocConfig:
    """
    Parse a YAML configuration file.

    Args:
        config_path: Path to the YAML file

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If the file is missing or invalid
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}") from e

    if data is None:
        logger.debug(f"Configuration file is empty, using defaults: {config_path}")
        return ProtocConfig()

    return ProtocConfig.from_dict(data)
