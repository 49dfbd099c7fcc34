"""Catalog query commands for Cloudscape Server CLI."""

import click

from cloudscape_server.core.errors import CloudscapeError
from cloudscape_server.mcp_server.resources import CloudscapeResources
from cloudscape_server.mcp_server.tools import CloudscapeTools
from cloudscape_server.models.domain.catalog import ComponentCategory

from ..utils import echo_error, get_catalog, print_document

raw_option = click.option(
    "--raw", is_flag=True, help="Print Markdown source instead of rendering it"
)


@click.command()
@click.argument("query")
@click.option(
    "--category",
    type=click.Choice([category.value for category in ComponentCategory]),
    default=None,
    help="Only return components in this category",
)
@raw_option
@click.help_option("-h", "--help")
@click.pass_context
def search(ctx, query, category, raw):
    """Search components by name, description or usage.

    Matching is a case-insensitive substring test.

    Examples:
        cloudscape-mcp search table
        cloudscape-mcp search input --category Form
    """
    tools = CloudscapeTools(get_catalog(ctx))
    selected = ComponentCategory(category) if category else None
    print_document(tools.search_components(query, selected), raw)


@click.command()
@click.argument("use_case")
@raw_option
@click.help_option("-h", "--help")
@click.pass_context
def recommend(ctx, use_case, raw):
    """Recommend up to three components for a use case.

    Examples:
        cloudscape-mcp recommend "show tabular data with sorting"
    """
    tools = CloudscapeTools(get_catalog(ctx))
    print_document(tools.get_component_recommendation(use_case), raw)


@click.command()
@click.argument("address")
@raw_option
@click.help_option("-h", "--help")
@click.pass_context
def read(ctx, address, raw):
    """Read a catalog resource by address.

    Examples:
        cloudscape-mcp read cloudscape://component/button
        cloudscape-mcp read cloudscape://pattern/empty-state
        cloudscape-mcp read cloudscape://category/Container
    """
    resources = CloudscapeResources(get_catalog(ctx))
    try:
        document = resources.read_resource(address)
    except CloudscapeError as e:
        echo_error(e.message)
        ctx.exit(1)
    print_document(document, raw)
