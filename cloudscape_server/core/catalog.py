"""Read-only Cloudscape catalog store.

The catalog is loaded once from the packaged YAML definition (or a
configured override), validated into frozen pydantic models and exposed
through read-only mappings. Nothing in this module mutates a loaded store.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from functools import lru_cache
from importlib import resources
from pathlib import Path
from types import MappingProxyType

import yaml
from pydantic import ValidationError

from cloudscape_server.core.errors import CatalogIntegrityError
from cloudscape_server.models.domain.catalog import (
    Component,
    ComponentCategory,
    Pattern,
)

logger = logging.getLogger(__name__)

CATALOG_DIR = "data"
CATALOG_FILE = "catalog.yaml"


class CatalogStore:
    """Immutable collections of components, patterns and the category index."""

    def __init__(
        self,
        components: Iterable[Component],
        patterns: Iterable[Pattern] = (),
        categories: Mapping[ComponentCategory, Iterable[str]] | None = None,
    ):
        component_map: dict[str, Component] = {}
        for component in components:
            if component.id in component_map:
                raise CatalogIntegrityError(
                    f"Duplicate component id '{component.id}'",
                    {"id": component.id},
                )
            component_map[component.id] = component

        pattern_map: dict[str, Pattern] = {}
        for pattern in patterns:
            if pattern.id in pattern_map:
                raise CatalogIntegrityError(
                    f"Duplicate pattern id '{pattern.id}'", {"id": pattern.id}
                )
            pattern_map[pattern.id] = pattern

        if categories is None:
            categories = {
                category: [c.id for c in component_map.values() if c.category == category]
                for category in ComponentCategory
            }

        index = {
            category: tuple(categories.get(category, ()))
            for category in ComponentCategory
        }
        _check_category_index(component_map, index)

        self._components = MappingProxyType(component_map)
        self._patterns = MappingProxyType(pattern_map)
        self._categories = MappingProxyType(index)

    def get_component(self, component_id: str) -> Component | None:
        """Look up a component by id."""
        return self._components.get(component_id)

    def get_pattern(self, pattern_id: str) -> Pattern | None:
        """Look up a pattern by id."""
        return self._patterns.get(pattern_id)

    def get_category_members(self, category: ComponentCategory) -> list[Component]:
        """Components assigned to a category, in index order."""
        return [self._components[cid] for cid in self._categories.get(category, ())]

    def all_components(self) -> list[Component]:
        """All components in definition order."""
        return list(self._components.values())

    def all_patterns(self) -> list[tuple[str, Pattern]]:
        """All patterns as (id, pattern) pairs in definition order."""
        return list(self._patterns.items())

    @property
    def categories(self) -> Mapping[ComponentCategory, tuple[str, ...]]:
        """Read-only category to component-id index."""
        return self._categories

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[Component]:
        return iter(self._components.values())

    def __contains__(self, component_id: object) -> bool:
        return component_id in self._components

    def __repr__(self) -> str:
        return (
            f"CatalogStore(components={len(self._components)}, "
            f"patterns={len(self._patterns)})"
        )


def _check_category_index(
    components: Mapping[str, Component],
    index: Mapping[ComponentCategory, tuple[str, ...]],
) -> None:
    """Verify the category index and the components agree."""
    for category, member_ids in index.items():
        for member_id in member_ids:
            component = components.get(member_id)
            if component is None:
                raise CatalogIntegrityError(
                    f"Category '{category.value}' lists unknown component '{member_id}'",
                    {"category": category.value, "id": member_id},
                )
            if component.category != category:
                raise CatalogIntegrityError(
                    f"Component '{member_id}' is listed under '{category.value}' "
                    f"but belongs to '{component.category.value}'",
                    {"category": category.value, "id": member_id},
                )

    for component in components.values():
        if component.id not in index[component.category]:
            raise CatalogIntegrityError(
                f"Component '{component.id}' is missing from category "
                f"'{component.category.value}'",
                {"category": component.category.value, "id": component.id},
            )


def parse_catalog(data: Mapping) -> CatalogStore:
    """Build a catalog store from a decoded catalog definition."""
    try:
        components = [Component.model_validate(item) for item in data.get("components") or []]
        patterns = [Pattern.model_validate(item) for item in data.get("patterns") or []]
        raw_categories = data.get("categories")
        categories = None
        if raw_categories is not None:
            categories = {
                ComponentCategory(name): list(member_ids or [])
                for name, member_ids in raw_categories.items()
            }
    except (ValidationError, ValueError) as e:
        raise CatalogIntegrityError(f"Invalid catalog definition: {e}") from e

    return CatalogStore(components, patterns, categories)


def load_catalog(path: Path | None = None) -> CatalogStore:
    """Load a catalog from a YAML file, defaulting to the packaged catalog.

    Args:
        path: Optional catalog file overriding the packaged definition

    Returns:
        CatalogStore with the validated catalog

    Raises:
        CatalogIntegrityError: If the definition is unreadable or inconsistent
    """
    try:
        if path is None:
            source = resources.files("cloudscape_server").joinpath(CATALOG_DIR, CATALOG_FILE)
            text = source.read_text(encoding="utf-8")
        else:
            text = Path(path).read_text(encoding="utf-8")
        data = yaml.safe_load(text) or {}
    except (OSError, yaml.YAMLError) as e:
        raise CatalogIntegrityError(f"Failed to read catalog definition: {e}") from e

    if not isinstance(data, Mapping):
        raise CatalogIntegrityError("Catalog definition must be a mapping")

    catalog = parse_catalog(data)
    logger.info(f"Loaded catalog: {catalog!r}")
    return catalog


@lru_cache(maxsize=1)
def get_default_catalog() -> CatalogStore:
    """The packaged catalog, loaded once per process."""
    return load_catalog()


__all__ = [
    "CatalogStore",
    "parse_catalog",
    "load_catalog",
    "get_default_catalog",
]
