"""Integration tests driving the MCP server over stdio."""

import sys

import pytest
from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client
from mcp.shared.exceptions import McpError
from pydantic import AnyUrl

SERVER_PARAMS = StdioServerParameters(
    command=sys.executable,
    args=["-m", "cloudscape_server.mcp_server.main"],
)


@pytest.mark.asyncio
async def test_stdio_session():
    """Test resources, tools and prompts through a real client session."""
    async with stdio_client(SERVER_PARAMS) as (read_stream, write_stream):
        async with ClientSession(read_stream, write_stream) as session:
            init = await session.initialize()
            assert init.serverInfo.name == "aws-cloudscape-mcp-server"

            listing = await session.list_resources()
            uris = [str(resource.uri) for resource in listing.resources]
            assert "cloudscape://component/button" in uris
            assert "cloudscape://category/Container" in uris

            document = await session.read_resource(AnyUrl("cloudscape://component/button"))
            assert document.contents[0].text.startswith("# Button")

            with pytest.raises(McpError):
                await session.read_resource(AnyUrl("cloudscape://component/does-not-exist"))

            tools = await session.list_tools()
            assert {tool.name for tool in tools.tools} == {
                "search_components",
                "get_component_recommendation",
            }

            search = await session.call_tool("search_components", {"query": "table"})
            assert not search.isError
            assert "## [Table]" in search.content[0].text

            recommendation = await session.call_tool(
                "get_component_recommendation",
                {"use_case": "I need a way to show tabular data with sorting and filtering"},
            )
            assert "## [Table]" in recommendation.content[0].text

            unknown = await session.call_tool("delete_everything", {})
            assert unknown.isError

            prompts = await session.list_prompts()
            assert len(prompts.prompts) == 2
            prompt = await session.get_prompt("cloudscape_best_practices")
            assert "**Button:**" in prompt.messages[1].content.text
