"""Unit tests for server configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from cloudscape_server.models.config.server import ServerConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove configuration variables from the environment."""
    for name in [
        "FASTMCP_LOG_LEVEL",
        "CLOUDSCAPE_MCP_LOG_LEVEL",
        "CLOUDSCAPE_MCP_SERVER_NAME",
        "CLOUDSCAPE_MCP_CATALOG_PATH",
    ]:
        monkeypatch.delenv(name, raising=False)


class TestServerConfig:
    """Test configuration defaults and overrides."""

    def test_defaults(self):
        """Test default values."""
        config = ServerConfig()
        assert config.server_name == "aws-cloudscape-mcp-server"
        assert config.server_version == "0.1.0"
        assert config.resolved_log_level == "INFO"
        assert config.catalog_path is None

    def test_env_prefix(self, monkeypatch):
        """Test prefixed environment variables."""
        monkeypatch.setenv("CLOUDSCAPE_MCP_SERVER_NAME", "cloudscape-dev")
        monkeypatch.setenv("CLOUDSCAPE_MCP_CATALOG_PATH", "/tmp/catalog.yaml")
        config = ServerConfig()
        assert config.server_name == "cloudscape-dev"
        assert config.catalog_path == Path("/tmp/catalog.yaml")

    def test_fastmcp_log_level(self, monkeypatch):
        """Test the installer's log level variable is honored."""
        monkeypatch.setenv("FASTMCP_LOG_LEVEL", "error")
        assert ServerConfig().resolved_log_level == "ERROR"

    def test_own_log_level_wins(self, monkeypatch):
        """Test the prefixed log level takes precedence."""
        monkeypatch.setenv("FASTMCP_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("CLOUDSCAPE_MCP_LOG_LEVEL", "debug")
        assert ServerConfig().resolved_log_level == "DEBUG"

    def test_invalid_log_level(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            ServerConfig(log_level="chatty")


class TestLoadFromFile:
    """Test YAML configuration files."""

    def test_missing_file(self, tmp_path):
        """Test a missing file yields defaults."""
        config = ServerConfig.load_from_file(tmp_path / "config.yaml")
        assert config.server_name == "aws-cloudscape-mcp-server"

    def test_load_values(self, tmp_path):
        """Test values are read from the file."""
        path = tmp_path / "config.yaml"
        path.write_text("server_name: from-file\nlog_level: warning\n")
        config = ServerConfig.load_from_file(path)
        assert config.server_name == "from-file"
        assert config.resolved_log_level == "WARNING"

    def test_invalid_file(self, tmp_path):
        """Test an invalid file falls back to defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("log_level: [not, a, level]\n")
        config = ServerConfig.load_from_file(path)
        assert config.resolved_log_level == "INFO"

    def test_unparseable_file(self, tmp_path):
        """Test broken YAML falls back to defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("server_name: [unclosed\n")
        assert ServerConfig.load_from_file(path).server_name == "aws-cloudscape-mcp-server"
