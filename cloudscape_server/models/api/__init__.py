"""Request and listing models used by the MCP server."""

from cloudscape_server.models.api.resources import *

__all__ = [
    "MARKDOWN_MIME_TYPE",
    "ResourceType",
    "ResourceInfo",
    "SearchComponentsRequest",
    "RecommendationRequest",
]
