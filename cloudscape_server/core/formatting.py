"""Markdown rendering for catalog entries and query results."""

from collections.abc import Sequence

from cloudscape_server.core.catalog import CatalogStore
from cloudscape_server.models.domain.catalog import (
    Component,
    ComponentCategory,
    Pattern,
)

USAGE_SUMMARY_LENGTH = 150
ELLIPSIS = "..."


def truncate(text: str, length: int = USAGE_SUMMARY_LENGTH) -> str:
    """Cut text to ``length`` characters, marking the cut with an ellipsis."""
    if len(text) <= length:
        return text
    return text[:length] + ELLIPSIS


def _code_block(code: str, language: str = "tsx") -> str:
    return f"```{language}\n{code}\n```"


def format_component(component: Component) -> str:
    """Render a component with examples, best practices and links."""
    sections = [
        f"# {component.name}",
        component.description,
        f"## Usage\n{component.usage}",
    ]

    examples = [
        f"### {example.title}\n{example.description}\n\n{_code_block(example.code)}"
        for example in component.examples
    ]
    sections.append("## Examples\n\n" + "\n\n".join(examples) if examples else "## Examples")

    practices = "\n".join(f"- {practice}" for practice in component.best_practices)
    sections.append(f"## Best Practices\n{practices}" if practices else "## Best Practices")

    links = [f"- [Component Documentation]({component.links.documentation})"]
    if component.links.design_guidelines:
        links.append(f"- [Design Guidelines]({component.links.design_guidelines})")
    sections.append("## Documentation Links\n" + "\n".join(links))

    return "\n\n".join(sections) + "\n"


def format_pattern(pattern: Pattern) -> str:
    """Render a design pattern."""
    return f"# {pattern.name}\n\n{pattern.description}\n\n## Usage\n{pattern.usage}\n"


def format_category(catalog: CatalogStore, category: ComponentCategory) -> str:
    """Render a category overview listing its components."""
    members = catalog.get_category_members(category)
    if members:
        body = "\n".join(
            f"- [{c.name}]({c.links.documentation}): {c.description}" for c in members
        )
    else:
        body = "No components in this category yet."
    return f"# {category.value} Components\n\n{body}\n"


def format_search_results(
    query: str,
    results: Sequence[Component],
    category: ComponentCategory | None = None,
) -> str:
    """Render search matches with truncated usage summaries."""
    query = query.lower()
    if not results:
        scope = f" in category {category.value}" if category else ""
        return f'No components found matching "{query}"{scope}.'

    entries = [
        f"## [{c.name}]({c.links.documentation})\n"
        f"**Category:** {c.category.value}\n\n"
        f"{c.description}\n\n"
        f"**Usage:** {truncate(c.usage)}"
        for c in results
    ]
    return (
        f'# Search Results for "{query}"\n\n'
        f"Found {len(results)} components:\n\n" + "\n\n".join(entries) + "\n"
    )


def format_recommendations(use_case: str, components: Sequence[Component]) -> str:
    """Render recommended components with their first example."""
    entries = []
    for c in components:
        code = c.examples[0].code if c.examples else "No example available"
        entries.append(
            f"## [{c.name}]({c.links.documentation})\n\n"
            f"{c.description}\n\n"
            f"**Usage:** {c.usage}\n\n"
            f"**Example:**\n{_code_block(code)}"
        )
    return (
        f'# Recommended Components for "{use_case}"\n\n'
        + "\n\n".join(entries)
        + "\n\nFor more details, access the full documentation for these components."
    )


def format_no_recommendation(use_case: str) -> str:
    """Render the message for a use case that matched nothing."""
    return (
        f'I couldn\'t find specific component recommendations for "{use_case}". '
        "Consider browsing the available components by category to find what you need."
    )


__all__ = [
    "USAGE_SUMMARY_LENGTH",
    "truncate",
    "format_component",
    "format_pattern",
    "format_category",
    "format_search_results",
    "format_recommendations",
    "format_no_recommendation",
]
