"""Unit tests for configuration parser."""

import logging

import pytest

from protockit.config.parser import (
    DEFAULT_DIST_URL,
    ProtocConfig,
    load_config,
)
from protockit.core.exceptions import ConfigError


class TestProtocConfig:
    """Tests for ProtocConfig.from_dict()."""

    def test_default(self):
        assert ProtocConfig().dist_url == DEFAULT_DIST_URL
        assert DEFAULT_DIST_URL == (
            "https://github.com/protocolbuffers/protobuf/releases/download/v{version}/{file}"
        )

    @pytest.mark.parametrize("data", [None, {}])
    def test_empty_uses_defaults(self, data):
        assert ProtocConfig.from_dict(data) == ProtocConfig()

    def test_custom_dist_url(self):
        config = ProtocConfig.from_dict({"dist-url": "https://mirror/{version}/{file}"})
        assert config.dist_url == "https://mirror/{version}/{file}"

    def test_unknown_field(self):
        with pytest.raises(ConfigError, match="Unknown configuration field"):
            ProtocConfig.from_dict({"dist_url": "https://mirror/{version}/{file}"})

    @pytest.mark.parametrize("value", [42, "", "   ", None])
    def test_invalid_dist_url(self, value):
        with pytest.raises(ConfigError, match="dist-url"):
            ProtocConfig.from_dict({"dist-url": value})

    def test_not_a_mapping(self):
        with pytest.raises(ConfigError, match="mapping"):
            ProtocConfig.from_dict(["dist-url"])

    def test_missing_placeholder_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="protockit.config.parser"):
            config = ProtocConfig.from_dict({"dist-url": "https://mirror/{file}"})

        assert config.dist_url == "https://mirror/{file}"
        assert "{version}" in caplog.text

    def test_to_dict_round_trip(self):
        config = ProtocConfig(dist_url="https://mirror/{version}/{file}")
        assert ProtocConfig.from_dict(config.to_dict()) == config

    def test_schema(self):
        schema = ProtocConfig.schema()
        assert schema["dist-url"]["type"] == "string"
        assert schema["dist-url"]["default"] == DEFAULT_DIST_URL


class TestLoadConfig:
    """Tests for load_config()."""

    def test_load(self, tmp_path):
        config_file = tmp_path / "protoc.yaml"
        config_file.write_text("dist-url: https://mirror.example.com/{version}/{file}\n")

        config = load_config(config_file)

        assert config.dist_url == "https://mirror.example.com/{version}/{file}"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "missing.yaml")

    def test_empty_file(self, tmp_path):
        config_file = tmp_path / "protoc.yaml"
        config_file.write_text("")

        assert load_config(config_file) == ProtocConfig()

    def test_invalid_yaml(self, tmp_path):
        config_file = tmp_path / "protoc.yaml"
        config_file.write_text("dist-url: [unclosed\n")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(config_file)

    def test_unknown_key_in_file(self, tmp_path):
        config_file = tmp_path / "protoc.yaml"
        config_file.write_text("mirror: https://example.com\n")

        with pytest.raises(ConfigError):
            load_config(config_file)
