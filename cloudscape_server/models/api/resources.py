"""MCP-facing request and listing models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from cloudscape_server.models.domain.catalog import ComponentCategory

MARKDOWN_MIME_TYPE = "text/markdown"


class ResourceType(str, Enum):
    """Kinds of addressable catalog entries."""

    COMPONENT = "component"
    PATTERN = "pattern"
    CATEGORY = "category"


class ResourceInfo(BaseModel):
    """Listing entry for one addressable catalog resource."""

    uri: str
    name: str
    description: str
    mime_type: str = MARKDOWN_MIME_TYPE


class SearchComponentsRequest(BaseModel):
    """Arguments of the search_components tool."""

    model_config = ConfigDict(extra="ignore")

    query: str = Field(..., description="Text matched against name, description and usage")
    category: ComponentCategory | None = Field(
        None, description="Restrict results to one component category"
    )


class RecommendationRequest(BaseModel):
    """Arguments of the get_component_recommendation tool."""

    model_config = ConfigDict(extra="ignore")

    use_case: str = Field(..., description="What the user is trying to build")


__all__ = [
    "MARKDOWN_MIME_TYPE",
    "ResourceType",
    "ResourceInfo",
    "SearchComponentsRequest",
    "RecommendationRequest",
]
