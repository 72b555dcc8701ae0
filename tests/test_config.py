"""Tests for urlshort.config — ServerConfig frozen dataclass."""

import dataclasses

import pytest

from urlshort.config import ServerConfig
from urlshort.errors import ConfigurationError


class TestServerConfig:
    def test_defaults(self) -> None:
        cfg = ServerConfig()

        assert cfg.host == "127.0.0.1"
        assert cfg.port == 8080
        assert cfg.log_level == "info"
        assert cfg.format is None

    def test_override(self) -> None:
        cfg = ServerConfig(host="0.0.0.0", port=3000, log_level="debug", format="json")

        assert cfg.host == "0.0.0.0"
        assert cfg.port == 3000
        assert cfg.log_level == "debug"
        assert cfg.format == "json"

    def test_frozen(self) -> None:
        cfg = ServerConfig()

        with pytest.raises(AttributeError):
            cfg.port = 1  # type: ignore[misc]

    def test_replace(self) -> None:
        cfg = dataclasses.replace(ServerConfig(), port=9000)
        assert cfg.port == 9000
        assert cfg.host == "127.0.0.1"


class TestValidate:
    def test_defaults_valid(self) -> None:
        ServerConfig().validate()

    @pytest.mark.parametrize("port", [0, 80, 65535])
    def test_port_bounds_valid(self, port: int) -> None:
        ServerConfig(port=port).validate()

    @pytest.mark.parametrize("port", [-1, 65536])
    def test_port_out_of_range(self, port: int) -> None:
        with pytest.raises(ConfigurationError, match="port"):
            ServerConfig(port=port).validate()

    def test_log_level_case_insensitive(self) -> None:
        ServerConfig(log_level="DEBUG").validate()

    def test_unknown_log_level(self) -> None:
        with pytest.raises(ConfigurationError, match="log level"):
            ServerConfig(log_level="verbose").validate()

    def test_unknown_format(self) -> None:
        with pytest.raises(ConfigurationError, match="format"):
            ServerConfig(format="toml").validate()
