"""Server commands for Cloudscape Server CLI."""

import asyncio

import click

from cloudscape_server.core.errors import CloudscapeError
from cloudscape_server.mcp_server.main import main as run_server


@click.command()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Override the configured log level",
)
@click.help_option("-h", "--help")
@click.pass_context
def serve(ctx, log_level):
    """Run the MCP server over stdio.

    This is what MCP clients launch; it reads requests on stdin and writes
    responses on stdout. Logs go to stderr.
    """
    config = ctx.obj["config"]
    if log_level:
        config = config.model_copy(update={"log_level": log_level.upper()})

    try:
        asyncio.run(run_server(config))
    except KeyboardInterrupt:
        pass
    except CloudscapeError as e:
        click.echo(f"Failed to start server: {e.message}", err=True)
        ctx.exit(1)
