"""MCP resources exposing catalog entries as Markdown documents."""

import logging

from cloudscape_server.core.addressing import format_address, resolve_address
from cloudscape_server.core.catalog import CatalogStore
from cloudscape_server.core.formatting import (
    format_category,
    format_component,
    format_pattern,
)
from cloudscape_server.models.api.resources import ResourceInfo, ResourceType
from cloudscape_server.models.domain.catalog import (
    Component,
    ComponentCategory,
    Pattern,
)

logger = logging.getLogger(__name__)


class CloudscapeResources:
    """Listing and reading of component, pattern and category resources."""

    def __init__(self, catalog: CatalogStore):
        self.catalog = catalog

    def list_resources(self) -> list[ResourceInfo]:
        """One entry per component, then per pattern, then per category."""
        components = [
            ResourceInfo(
                uri=format_address(ResourceType.COMPONENT, c.id),
                name=c.name,
                description=f"{c.description} ({c.category.value})",
            )
            for c in self.catalog.all_components()
        ]
        patterns = [
            ResourceInfo(
                uri=format_address(ResourceType.PATTERN, pattern_id),
                name=pattern.name,
                description=pattern.description,
            )
            for pattern_id, pattern in self.catalog.all_patterns()
        ]
        categories = [
            ResourceInfo(
                uri=format_address(ResourceType.CATEGORY, category.value),
                name=f"{category.value} Components",
                description=f"Overview of all {category.value} components in Cloudscape",
            )
            for category in ComponentCategory
        ]
        return components + patterns + categories

    def read_resource(self, address: str) -> str:
        """Render the entry an address points at.

        Raises:
            MalformedAddressError: If the address cannot be parsed
            NotFoundError: If nothing matches the address
        """
        entry = resolve_address(self.catalog, address)
        logger.debug(f"Resolved {address} to {type(entry).__name__}")

        if isinstance(entry, Component):
            return format_component(entry)
        if isinstance(entry, Pattern):
            return format_pattern(entry)
        return format_category(self.catalog, entry)
