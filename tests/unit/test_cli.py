"""Unit tests for the command-line interface."""

import json
import sys

import pytest
from click.testing import CliRunner

from cloudscape_server.cli.commands.install import (
    SERVER_KEY,
    SERVER_MODULE,
    add_server_to_settings,
    get_mcp_settings_path,
    server_entry,
)
from cloudscape_server.cli.main import cli
from cloudscape_server.core.errors import CloudscapeError


class TestCatalogCommands:
    """Test the search, recommend and read commands."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def test_version(self):
        """Test the version flag."""
        result = self.runner.invoke(cli, ["-v"])
        assert result.exit_code == 0
        assert "v0.1.0" in result.output

    def test_search_raw(self):
        """Test raw search output."""
        result = self.runner.invoke(cli, ["search", "input", "--category", "Form", "--raw"])
        assert result.exit_code == 0
        assert '# Search Results for "input"' in result.output
        assert "## [Form](https://cloudscape.design/components/form/)" in result.output

    def test_search_rejects_unknown_category(self):
        """Test the category option only accepts known categories."""
        result = self.runner.invoke(cli, ["search", "input", "--category", "Widgets"])
        assert result.exit_code != 0

    def test_recommend_raw(self):
        """Test raw recommendation output."""
        result = self.runner.invoke(cli, ["recommend", "a data table", "--raw"])
        assert result.exit_code == 0
        assert "## [Table]" in result.output

    def test_read_raw(self):
        """Test reading a resource."""
        result = self.runner.invoke(cli, ["read", "cloudscape://pattern/empty-state", "--raw"])
        assert result.exit_code == 0
        assert result.output.startswith("# Empty state")

    def test_read_rendered(self):
        """Test rendered output contains the heading text."""
        result = self.runner.invoke(cli, ["read", "cloudscape://component/alert"])
        assert result.exit_code == 0
        assert "Alert" in result.output

    def test_read_not_found(self):
        """Test reading a missing resource exits with an error."""
        result = self.runner.invoke(cli, ["read", "cloudscape://component/does-not-exist"])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_read_malformed(self):
        """Test reading a malformed address exits with an error."""
        result = self.runner.invoke(cli, ["read", "not-a-valid-uri"])
        assert result.exit_code == 1
        assert "Invalid resource URI format" in result.output


class TestInstall:
    """Test registering the server in the MCP settings."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def test_settings_path_linux(self, tmp_path):
        """Test the Linux settings location."""
        path = get_mcp_settings_path("linux", tmp_path)
        assert path == (
            tmp_path / ".vscode" / "User" / "globalStorage" / "asbx.amzn-cline"
            / "settings" / "cline_mcp_settings.json"
        )

    def test_settings_path_windows(self, tmp_path):
        """Test the Windows settings location."""
        path = get_mcp_settings_path("win32", tmp_path)
        assert path.parts[-8:-5] == ("AppData", "Roaming", "Code")

    def test_settings_path_macos_fallback(self, tmp_path):
        """Test macOS falls back to Application Support when present."""
        alternative = (
            tmp_path / "Library" / "Application Support" / "Code" / "User"
            / "globalStorage" / "asbx.amzn-cline" / "settings"
        )
        alternative.mkdir(parents=True)
        assert get_mcp_settings_path("darwin", tmp_path) == alternative / "cline_mcp_settings.json"

    def test_settings_path_macos_primary(self, tmp_path):
        """Test macOS uses the primary location when no fallback exists."""
        path = get_mcp_settings_path("darwin", tmp_path)
        assert ".vscode" in path.parts

    def test_unsupported_platform(self, tmp_path):
        """Test unsupported platforms fail."""
        with pytest.raises(CloudscapeError, match="Unsupported platform: sunos5"):
            get_mcp_settings_path("sunos5", tmp_path)

    def test_server_entry(self):
        """Test the settings entry launches the server module."""
        entry = server_entry("/usr/bin/python3")
        assert entry == {
            "command": "/usr/bin/python3",
            "args": ["-m", SERVER_MODULE],
            "env": {"FASTMCP_LOG_LEVEL": "ERROR"},
            "disabled": False,
            "autoApprove": [],
        }
        assert server_entry()["command"] == sys.executable

    def test_add_server_keeps_other_entries(self, tmp_path):
        """Test existing servers are preserved."""
        settings_path = tmp_path / "cline_mcp_settings.json"
        settings_path.write_text(json.dumps({"mcpServers": {"other": {"command": "x"}}, "theme": "dark"}))

        add_server_to_settings(settings_path, server_entry("python"))

        settings = json.loads(settings_path.read_text())
        assert settings["theme"] == "dark"
        assert settings["mcpServers"]["other"] == {"command": "x"}
        assert settings["mcpServers"][SERVER_KEY]["command"] == "python"

    def test_add_server_creates_section(self, tmp_path):
        """Test the mcpServers section is created when missing."""
        settings_path = tmp_path / "cline_mcp_settings.json"
        settings_path.write_text("{}")
        add_server_to_settings(settings_path, server_entry("python"))
        assert SERVER_KEY in json.loads(settings_path.read_text())["mcpServers"]

    def test_add_server_invalid_json(self, tmp_path):
        """Test unreadable settings fail."""
        settings_path = tmp_path / "cline_mcp_settings.json"
        settings_path.write_text("{not json")
        with pytest.raises(CloudscapeError, match="Invalid MCP settings file"):
            add_server_to_settings(settings_path, server_entry("python"))

    def test_install_command(self, tmp_path):
        """Test the install command updates the given settings file."""
        settings_path = tmp_path / "cline_mcp_settings.json"
        settings_path.write_text("{}")

        result = self.runner.invoke(
            cli,
            ["install", "--settings-path", str(settings_path), "--python", "/opt/py/bin/python"],
        )

        assert result.exit_code == 0
        assert "Installation complete" in result.output
        entry = json.loads(settings_path.read_text())["mcpServers"][SERVER_KEY]
        assert entry["command"] == "/opt/py/bin/python"

    def test_install_missing_settings(self, tmp_path):
        """Test a missing settings file exits with an error."""
        result = self.runner.invoke(
            cli, ["install", "--settings-path", str(tmp_path / "missing.json")]
        )
        assert result.exit_code == 1
        assert "MCP settings file not found" in result.output
