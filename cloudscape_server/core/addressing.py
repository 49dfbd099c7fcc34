"""Resource addressing for catalog entries.

Addresses have the shape ``cloudscape://<type>/<id>``. The id is everything
after the type segment and may itself contain ``/``.
"""

import re
from typing import NamedTuple

from cloudscape_server.core.catalog import CatalogStore
from cloudscape_server.core.errors import (
    MalformedAddressError,
    NotFoundError,
    UnknownResourceTypeError,
)
from cloudscape_server.models.api.resources import ResourceType
from cloudscape_server.models.domain.catalog import (
    Component,
    ComponentCategory,
    Pattern,
)

SCHEME = "cloudscape"

_ADDRESS_RE = re.compile(rf"^{SCHEME}://([^/]+)/(.+)$", re.DOTALL)


class ResourceAddress(NamedTuple):
    """A parsed resource address."""

    type: ResourceType
    id: str

    def __str__(self) -> str:
        return format_address(self.type, self.id)


def format_address(resource_type: ResourceType | str, resource_id: str) -> str:
    """Build the address for a catalog entry."""
    type_name = resource_type.value if isinstance(resource_type, ResourceType) else resource_type
    return f"{SCHEME}://{type_name}/{resource_id}"


def parse_address(address: str) -> ResourceAddress:
    """Split an address into its resource type and id.

    Raises:
        MalformedAddressError: If the address does not match the expected shape
        UnknownResourceTypeError: If the type segment is not a known resource type
    """
    match = _ADDRESS_RE.match(address)
    if not match:
        raise MalformedAddressError(address)

    type_name, resource_id = match.groups()
    try:
        resource_type = ResourceType(type_name)
    except ValueError:
        raise UnknownResourceTypeError(address, type_name) from None

    return ResourceAddress(resource_type, resource_id)


def resolve_address(
    catalog: CatalogStore, address: str | ResourceAddress
) -> Component | Pattern | ComponentCategory:
    """Resolve an address to the catalog entry it names.

    Raises:
        MalformedAddressError: If the address cannot be parsed
        NotFoundError: If no entry of that type has that id
    """
    if not isinstance(address, ResourceAddress):
        address = parse_address(address)

    resource_type, resource_id = address

    if resource_type is ResourceType.COMPONENT:
        component = catalog.get_component(resource_id)
        if component is None:
            raise NotFoundError(resource_type.value, resource_id)
        return component

    if resource_type is ResourceType.PATTERN:
        pattern = catalog.get_pattern(resource_id)
        if pattern is None:
            raise NotFoundError(resource_type.value, resource_id)
        return pattern

    try:
        return ComponentCategory(resource_id)
    except ValueError:
        raise NotFoundError(resource_type.value, resource_id) from None


__all__ = [
    "SCHEME",
    "ResourceAddress",
    "format_address",
    "parse_address",
    "resolve_address",
]
