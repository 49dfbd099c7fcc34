"""Main CLI entry point for Cloudscape Server."""

import click
from rich.console import Console

from cloudscape_server.models.config.server import ServerConfig

console = Console()


@click.group(invoke_without_command=True)
@click.option("-v", "--version", is_flag=True, help="Show version information")
@click.help_option("-h", "--help")
@click.pass_context
def cli(ctx, version):
    """Cloudscape Server - AWS Cloudscape Design System knowledge over MCP.

    Serve the Cloudscape component catalog to MCP clients, register the
    server with your editor, or query the catalog directly.

    Examples:
        cloudscape-mcp -v                                 # Show version
        cloudscape-mcp install                            # Register with Cline
        cloudscape-mcp serve                              # Run the stdio MCP server
        cloudscape-mcp search button                      # Search components
        cloudscape-mcp search input --category Form       # Search one category
        cloudscape-mcp recommend "list of resources"      # Get recommendations
        cloudscape-mcp read cloudscape://component/table  # Read a resource
    """
    if version:
        from . import __version__

        console.print(f"Cloudscape Server CLI v{__version__}")
        ctx.exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        ctx.exit()

    ctx.ensure_object(dict)
    ctx.obj["config"] = ServerConfig.load_from_file()


def register_commands():
    """Register all commands."""
    from .commands.catalog import read, recommend, search
    from .commands.install import install
    from .commands.server import serve

    cli.add_command(serve)
    cli.add_command(install)
    cli.add_command(search)
    cli.add_command(recommend)
    cli.add_command(read)


register_commands()


if __name__ == "__main__":
    cli()
