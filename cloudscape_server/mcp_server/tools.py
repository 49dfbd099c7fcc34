"""MCP tools for searching and recommending Cloudscape components."""

import logging
from collections.abc import Sequence
from enum import Enum
from typing import Any

import mcp.types as types
from pydantic import ValidationError

from cloudscape_server.core.catalog import CatalogStore
from cloudscape_server.core.errors import InvalidToolArgumentsError, UnknownToolError
from cloudscape_server.core.formatting import (
    format_no_recommendation,
    format_recommendations,
    format_search_results,
)
from cloudscape_server.core.query import (
    DEFAULT_RECOMMENDATION_RULES,
    NO_RECOMMENDATION,
    recommend_components,
    search_components,
)
from cloudscape_server.models.api.resources import (
    RecommendationRequest,
    SearchComponentsRequest,
)
from cloudscape_server.models.domain.catalog import (
    ComponentCategory,
    RecommendationRule,
)

logger = logging.getLogger(__name__)


class ToolName(str, Enum):
    """Tools offered by the server."""

    SEARCH_COMPONENTS = "search_components"
    GET_COMPONENT_RECOMMENDATION = "get_component_recommendation"


def tool_definitions() -> list[types.Tool]:
    """MCP tool descriptors with their input schemas."""
    return [
        types.Tool(
            name=ToolName.SEARCH_COMPONENTS.value,
            description="Search for Cloudscape components by criteria",
            inputSchema={
                "type": "object",
                "properties": {
                    "query": {
                        "type": "string",
                        "description": "Search query to match against component names, descriptions, or usage",
                    },
                    "category": {
                        "type": "string",
                        "description": "Filter by component category",
                        "enum": [category.value for category in ComponentCategory],
                    },
                },
                "required": ["query"],
            },
        ),
        types.Tool(
            name=ToolName.GET_COMPONENT_RECOMMENDATION.value,
            description="Get a recommendation for which Cloudscape component to use for a specific UI need",
            inputSchema={
                "type": "object",
                "properties": {
                    "use_case": {
                        "type": "string",
                        "description": "Description of what you're trying to build or the user need you're addressing",
                    }
                },
                "required": ["use_case"],
            },
        ),
    ]


class CloudscapeTools:
    """Implementations of the search and recommendation tools."""

    def __init__(
        self,
        catalog: CatalogStore,
        rules: Sequence[RecommendationRule] = DEFAULT_RECOMMENDATION_RULES,
    ):
        self.catalog = catalog
        self.rules = rules

    def call(self, name: str, arguments: dict[str, Any] | None) -> str:
        """Dispatch a tool call by name.

        Raises:
            UnknownToolError: If the tool name is not offered
            InvalidToolArgumentsError: If the arguments fail validation
        """
        try:
            tool = ToolName(name)
        except ValueError:
            raise UnknownToolError(name) from None

        arguments = arguments or {}
        try:
            if tool is ToolName.SEARCH_COMPONENTS:
                request = SearchComponentsRequest.model_validate(arguments)
                return self.search_components(request.query, request.category)
            request = RecommendationRequest.model_validate(arguments)
            return self.get_component_recommendation(request.use_case)
        except ValidationError as e:
            raise InvalidToolArgumentsError(
                f"Invalid arguments for {tool.value}: {e}",
                {"errors": e.errors(include_url=False)},
            ) from e

    def search_components(
        self, query: str, category: ComponentCategory | None = None
    ) -> str:
        """Search components and render the matches.

        Args:
            query: Case-insensitive text to look for
            category: Optional category to restrict results to

        Returns:
            Markdown summary of matching components
        """
        scope = category.value if category else "all"
        logger.debug(f"Searching components with query: {query}, category: {scope}")
        results = search_components(self.catalog, query, category)
        return format_search_results(query, results, category)

    def get_component_recommendation(self, use_case: str) -> str:
        """Recommend up to three components for a use case.

        Args:
            use_case: What the user is trying to build

        Returns:
            Markdown recommendations, or a hint to browse categories
        """
        logger.debug(f"Getting component recommendation for use case: {use_case}")
        recommended = recommend_components(use_case, self.rules)
        if recommended is NO_RECOMMENDATION:
            return format_no_recommendation(use_case)

        components = []
        for component_id in recommended:
            component = self.catalog.get_component(component_id)
            if component is None:
                logger.warning(f"Recommendation rule names unknown component '{component_id}'")
                continue
            components.append(component)

        if not components:
            return format_no_recommendation(use_case)
        return format_recommendations(use_case, components)
