"""Centralized model definitions for Cloudscape Server.

This package contains all Pydantic models organized by domain:
- api/: MCP request and listing models
- domain/: Catalog domain models
- config/: Configuration models
"""

from cloudscape_server.models.api.resources import *
from cloudscape_server.models.config.server import *
from cloudscape_server.models.domain.catalog import *

__all__ = [
    # API models
    "MARKDOWN_MIME_TYPE",
    "ResourceType",
    "ResourceInfo",
    "SearchComponentsRequest",
    "RecommendationRequest",
    # Domain models
    "ComponentCategory",
    "Example",
    "ComponentLinks",
    "Component",
    "Pattern",
    "RecommendationRule",
    # Config models
    "ServerConfig",
]
