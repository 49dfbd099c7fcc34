"""Editor integration commands for Cloudscape Server CLI."""

import json
import sys
from pathlib import Path

import click

from cloudscape_server.core.errors import CloudscapeError

from ..utils import echo_error, echo_info, echo_success

SERVER_KEY = "aws-cloudscape-mcp-server"
EXTENSION_ID = "asbx.amzn-cline"
SETTINGS_FILENAME = "cline_mcp_settings.json"
SERVER_MODULE = "cloudscape_server.mcp_server.main"


def get_mcp_settings_path(platform: str | None = None, home: Path | None = None) -> Path:
    """Locate the Cline MCP settings file for a platform.

    Raises:
        CloudscapeError: If the platform is not supported
    """
    platform = platform or sys.platform
    home = home or Path.home()

    if platform == "darwin" or platform.startswith("linux"):
        base_path = home / ".vscode" / "User" / "globalStorage" / EXTENSION_ID / "settings"
    elif platform == "win32":
        base_path = (
            home / "AppData" / "Roaming" / "Code" / "User" / "globalStorage"
            / EXTENSION_ID / "settings"
        )
    else:
        raise CloudscapeError(f"Unsupported platform: {platform}")

    if platform == "darwin" and not base_path.exists():
        alternative = (
            home / "Library" / "Application Support" / "Code" / "User"
            / "globalStorage" / EXTENSION_ID / "settings"
        )
        if alternative.exists():
            base_path = alternative

    return base_path / SETTINGS_FILENAME


def server_entry(python: str | None = None) -> dict:
    """MCP settings entry that launches this server."""
    return {
        "command": python or sys.executable,
        "args": ["-m", SERVER_MODULE],
        "env": {"FASTMCP_LOG_LEVEL": "ERROR"},
        "disabled": False,
        "autoApprove": [],
    }


def add_server_to_settings(settings_path: Path, entry: dict) -> None:
    """Add or replace the server entry, keeping other settings intact.

    Raises:
        CloudscapeError: If the settings file is missing or unreadable
    """
    if not settings_path.exists():
        raise CloudscapeError(
            f"MCP settings file not found at {settings_path}",
            {"path": str(settings_path)},
        )

    try:
        with open(settings_path, "r", encoding="utf-8") as f:
            settings = json.load(f)
    except json.JSONDecodeError as e:
        raise CloudscapeError(f"Invalid MCP settings file {settings_path}: {e}") from e

    if not isinstance(settings, dict):
        raise CloudscapeError(f"MCP settings file {settings_path} must contain a JSON object")

    settings.setdefault("mcpServers", {})[SERVER_KEY] = entry

    with open(settings_path, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)


@click.command()
@click.option(
    "--settings-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="MCP settings file (auto-detected if not provided)",
)
@click.option(
    "--python",
    "python_executable",
    default=None,
    help="Interpreter the editor should launch the server with",
)
@click.help_option("-h", "--help")
@click.pass_context
def install(ctx, settings_path, python_executable):
    """Register the Cloudscape MCP server in Cline's MCP settings.

    Adds an 'aws-cloudscape-mcp-server' entry to cline_mcp_settings.json so
    the editor launches the server on demand.
    """
    echo_info("📦 Installing AWS Cloudscape MCP Server...")

    entry = server_entry(python_executable)
    try:
        if settings_path is None:
            settings_path = get_mcp_settings_path()
        add_server_to_settings(settings_path, entry)
    except CloudscapeError as e:
        echo_error(e.message)
        if "path" in e.details:
            echo_info("Please make sure Cline is installed correctly.")
        ctx.exit(1)

    echo_success("AWS Cloudscape MCP Server has been added to Cline MCP settings")
    echo_info(f"  • Settings: {settings_path}")
    echo_info(f"  • Command: {entry['command']} {' '.join(entry['args'])}")
    echo_success("🚀 Installation complete! You can now use aws-cloudscape-mcp-server with Cline.")
    echo_info("Example usage:")
    echo_info("  - Search for components: use aws-cloudscape-mcp-server tool search_components")
    echo_info(
        "  - Get recommendations: use aws-cloudscape-mcp-server tool get_component_recommendation"
    )
