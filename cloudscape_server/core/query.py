"""Search and recommendation over the component catalog.

Both operations are plain substring matching on lowercased text. There is no
stemming, fuzzy matching or relevance scoring beyond a flat keyword count.
"""

import logging
from collections.abc import Sequence
from enum import Enum

from cloudscape_server.core.catalog import CatalogStore
from cloudscape_server.models.domain.catalog import (
    Component,
    ComponentCategory,
    RecommendationRule,
)

logger = logging.getLogger(__name__)

MAX_RECOMMENDATIONS = 3


class NoRecommendation(Enum):
    """Sentinel for a use case that matched no keyword at all."""

    NO_RECOMMENDATION = "no_recommendation"

    def __bool__(self) -> bool:
        return False


NO_RECOMMENDATION = NoRecommendation.NO_RECOMMENDATION

# Declaration order is the tie-break order for equal match counts.
DEFAULT_RECOMMENDATION_RULES: tuple[RecommendationRule, ...] = (
    RecommendationRule(
        component_id="button",
        keywords=("button", "click", "action", "submit", "cancel"),
    ),
    RecommendationRule(
        component_id="table",
        keywords=("table", "data", "grid", "row", "column", "list", "items"),
    ),
    RecommendationRule(
        component_id="form",
        keywords=("form", "input", "field", "submit", "validation", "enter data"),
    ),
    RecommendationRule(
        component_id="header",
        keywords=("header", "title", "heading", "page title", "section title"),
    ),
    RecommendationRule(
        component_id="box",
        keywords=("container", "box", "group", "section", "panel"),
    ),
    RecommendationRule(
        component_id="alert",
        keywords=(
            "alert",
            "message",
            "notification",
            "warning",
            "error",
            "success",
            "info",
        ),
    ),
)


def matches_query(component: Component, query: str) -> bool:
    """Whether the lowercased query occurs in the component's name, description or usage."""
    needle = query.lower()
    return (
        needle in component.name.lower()
        or needle in component.description.lower()
        or needle in component.usage.lower()
    )


def search_components(
    catalog: CatalogStore,
    query: str,
    category: ComponentCategory | None = None,
) -> list[Component]:
    """Find components whose text contains the query.

    Args:
        catalog: Catalog to search
        query: Case-insensitive substring; an empty query matches everything
        category: Optional exact category filter

    Returns:
        Matching components in catalog definition order
    """
    results = [
        component
        for component in catalog.all_components()
        if matches_query(component, query)
        and (category is None or component.category == category)
    ]
    logger.debug(
        f"Search '{query}' in {category.value if category else 'all'}: "
        f"{len(results)} matches"
    )
    return results


def score_use_case(
    use_case: str, rules: Sequence[RecommendationRule] = DEFAULT_RECOMMENDATION_RULES
) -> dict[str, int]:
    """Count matching keywords per component, in first-rule order."""
    text = use_case.lower()
    scores: dict[str, int] = {}
    for rule in rules:
        for keyword in rule.keywords:
            if keyword.lower() in text:
                scores[rule.component_id] = scores.get(rule.component_id, 0) + 1
    return scores


def recommend_components(
    use_case: str,
    rules: Sequence[RecommendationRule] = DEFAULT_RECOMMENDATION_RULES,
    limit: int = MAX_RECOMMENDATIONS,
) -> list[str] | NoRecommendation:
    """Recommend component ids for a free-text use case.

    Args:
        use_case: Description of what the user wants to build
        rules: Keyword table to score against
        limit: Maximum number of component ids to return

    Returns:
        Up to ``limit`` component ids ordered by match count (ties keep rule
        order), or NO_RECOMMENDATION when nothing matched
    """
    scores = score_use_case(use_case, rules)
    if not scores:
        logger.debug(f"No recommendation for use case: {use_case}")
        return NO_RECOMMENDATION

    ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
    return [component_id for component_id, _ in ranked[:limit]]


__all__ = [
    "MAX_RECOMMENDATIONS",
    "NoRecommendation",
    "NO_RECOMMENDATION",
    "DEFAULT_RECOMMENDATION_RULES",
    "matches_query",
    "search_components",
    "score_use_case",
    "recommend_components",
]
