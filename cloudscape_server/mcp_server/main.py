"""Main MCP server for the Cloudscape catalog."""

import asyncio
import sys
from typing import Any

import mcp.server.stdio
import mcp.types as types
from mcp.server import NotificationOptions, Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.models import InitializationOptions
from pydantic import AnyUrl

from cloudscape_server.core.catalog import (
    CatalogStore,
    get_default_catalog,
    load_catalog,
)
from cloudscape_server.core.errors import CloudscapeError
from cloudscape_server.core.logging import get_logger, setup_logging
from cloudscape_server.models.api.resources import MARKDOWN_MIME_TYPE
from cloudscape_server.models.config.server import ServerConfig

from .prompts import CloudscapePrompts
from .resources import CloudscapeResources
from .tools import CloudscapeTools, tool_definitions

logger = get_logger(__name__)


def create_server(config: ServerConfig, catalog: CatalogStore) -> Server:
    """Build an MCP server serving the given catalog."""
    server = Server(config.server_name, version=config.server_version)
    resources = CloudscapeResources(catalog)
    tools = CloudscapeTools(catalog)
    prompts = CloudscapePrompts(catalog)

    @server.list_resources()
    async def handle_list_resources() -> list[types.Resource]:
        """List every component, pattern and category."""
        logger.debug("Listing all available Cloudscape components and patterns")
        return [
            types.Resource(
                uri=info.uri,
                name=info.name,
                description=info.description,
                mimeType=info.mime_type,
            )
            for info in resources.list_resources()
        ]

    @server.read_resource()
    async def handle_read_resource(uri: AnyUrl) -> list[ReadResourceContents]:
        """Render a component, pattern or category document."""
        address = str(uri)
        logger.debug("Reading resource", uri=address)
        try:
            content = resources.read_resource(address)
        except CloudscapeError as e:
            logger.error(f"Failed to read resource: {e.message}", uri=address)
            raise
        return [ReadResourceContents(content=content, mime_type=MARKDOWN_MIME_TYPE)]

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        """List available MCP tools."""
        logger.debug("Listing available Cloudscape tools")
        return tool_definitions()

    @server.call_tool()
    async def handle_call_tool(
        name: str, arguments: dict[str, Any] | None
    ) -> list[types.TextContent]:
        """Handle MCP tool calls."""
        logger.debug("Calling tool", name=name)
        try:
            text = tools.call(name, arguments)
        except CloudscapeError as e:
            logger.error(f"Tool execution failed: {e.message}", name=name)
            raise
        return [types.TextContent(type="text", text=text)]

    @server.list_prompts()
    async def handle_list_prompts() -> list[types.Prompt]:
        """List available prompts."""
        logger.debug("Listing available Cloudscape prompts")
        return prompts.list_prompts()

    @server.get_prompt()
    async def handle_get_prompt(
        name: str, arguments: dict[str, str] | None
    ) -> types.GetPromptResult:
        """Return a canned advisory conversation."""
        logger.debug("Getting prompt", name=name)
        try:
            return prompts.get_prompt(name)
        except CloudscapeError as e:
            logger.error(f"Prompt lookup failed: {e.message}", name=name)
            raise

    return server


def load_server_catalog(config: ServerConfig) -> CatalogStore:
    """The configured catalog, or the packaged one."""
    if config.catalog_path is not None:
        return load_catalog(config.catalog_path)
    return get_default_catalog()


async def main(config: ServerConfig | None = None):
    """Main entry point for the MCP server."""
    if config is None:
        config = ServerConfig.load_from_file()
    setup_logging(config.resolved_log_level, config.log_file)

    logger.info("Starting AWS Cloudscape MCP Server", name=config.server_name)
    catalog = load_server_catalog(config)
    server = create_server(config, catalog)

    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            InitializationOptions(
                server_name=config.server_name,
                server_version=config.server_version,
                capabilities=server.get_capabilities(
                    notification_options=NotificationOptions(),
                    experimental_capabilities={},
                ),
            ),
        )


def cli_main():
    """Synchronous entry point for script generation."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("MCP server stopped by user")
    except CloudscapeError as e:
        logger.critical(f"Failed to start server: {e.message}")
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
