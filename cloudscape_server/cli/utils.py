"""Utility functions for the Cloudscape Server CLI."""

import click
from rich.console import Console
from rich.markdown import Markdown

from cloudscape_server.core.catalog import CatalogStore
from cloudscape_server.core.errors import CloudscapeError
from cloudscape_server.mcp_server.main import load_server_catalog
from cloudscape_server.models.config.server import ServerConfig

console = Console()


def echo_success(message: str) -> None:
    """Print success message."""
    console.print(f"[green]✓ {message}[/green]")


def echo_error(message: str) -> None:
    """Print error message."""
    console.print(f"[red]✗ {message}[/red]")


def echo_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"[yellow]⚠ {message}[/yellow]")


def echo_info(message: str) -> None:
    """Print info message."""
    console.print(f"[blue]ℹ {message}[/blue]")


def print_document(text: str, raw: bool = False) -> None:
    """Print a Markdown document, rendered unless raw output is requested."""
    if raw:
        click.echo(text)
    else:
        console.print(Markdown(text))


def get_catalog(ctx: click.Context) -> CatalogStore:
    """Catalog for the current invocation, per the loaded configuration."""
    obj = ctx.ensure_object(dict)
    config = obj.get("config") or ServerConfig.load_from_file()
    try:
        return load_server_catalog(config)
    except CloudscapeError as e:
        echo_error(e.message)
        ctx.exit(1)
