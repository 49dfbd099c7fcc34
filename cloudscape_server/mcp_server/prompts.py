"""MCP prompts with canned Cloudscape guidance."""

from enum import Enum

import mcp.types as types

from cloudscape_server.core.catalog import CatalogStore
from cloudscape_server.core.errors import UnknownPromptError


class PromptName(str, Enum):
    """Prompts offered by the server."""

    BEST_PRACTICES = "cloudscape_best_practices"
    CONSOLE_PATTERNS = "aws_console_patterns"


PROMPT_DESCRIPTIONS = {
    PromptName.BEST_PRACTICES: "Get best practices for using AWS Cloudscape Design System",
    PromptName.CONSOLE_PATTERNS: "Get common AWS Console design patterns using Cloudscape",
}

GENERAL_BEST_PRACTICES = (
    "Maintain consistent spacing using Cloudscape's built-in spacing tokens",
    "Use the proper density mode based on the amount of information displayed",
    "Follow AWS's color palette and avoid custom colors when possible",
    "Use proper hierarchy with headers, containers, and content organization",
    "Ensure your interfaces are accessible by using proper ARIA attributes and keyboard navigation",
    "Use Cloudscape's responsive design patterns for different screen sizes",
    "Keep component usage consistent throughout your application",
    "Use the same form validation patterns across your application",
    "Follow AWS's error and notification patterns for consistency",
    "Utilize the Container and Layout components for proper page structure",
    "Always test your interfaces for accessibility and usability",
)

CONSOLE_PATTERNS_TEXT = """# Common AWS Console Design Patterns with Cloudscape

AWS Console applications follow these common design patterns:

## Navigation Patterns
- **App Layout**: Use the AppLayout component as the foundation for your application
- **Service Navigation**: Left side navigation with collapsible sections
- **Breadcrumbs**: Show location hierarchy and enable navigation to parent pages
- **Tabs**: Use tabs for switching between related views of the same entity

## Table Patterns
- **Resource Tables**: Tables with selection, filtering, and pagination
- **Preferences**: Allow users to customize table columns and views
- **Batch Actions**: Enable actions on multiple selected items
- **Inline Actions**: Provide actions for individual table rows

## Form Patterns
- **Create Forms**: Multi-step forms with validation
- **Form Sections**: Group related fields with expandable sections
- **Validation**: Inline validation with error messages
- **Help Panels**: Contextual help for complex forms

## Detail Pages
- **Header Actions**: Important actions in the page header
- **Split Panel**: Details panel that opens from the right
- **Tabs for Sections**: Organize details into tabbed sections
- **Status Indicators**: Show resource status with badges and icons

## Common Flows
- **Create-Read-Update-Delete (CRUD)**: Standard operations for resources
- **List-Detail**: Master-detail view of resources
- **Wizards**: Step-by-step workflows for complex tasks
- **Dashboard**: Overview with key metrics and actions

## Notification Patterns
- **Flash Messages**: Temporary notifications for user actions
- **Alerts**: Persistent alerts for important information
- **Loading States**: Skeleton screens and loading indicators
- **Empty States**: Helpful guidance when no data is available

Would you like me to elaborate on any specific pattern?"""


def _message(role: str, text: str) -> types.PromptMessage:
    return types.PromptMessage(role=role, content=types.TextContent(type="text", text=text))


class CloudscapePrompts:
    """Canned advisory conversations."""

    def __init__(self, catalog: CatalogStore):
        self.catalog = catalog

    def list_prompts(self) -> list[types.Prompt]:
        return [
            types.Prompt(name=name.value, description=PROMPT_DESCRIPTIONS[name])
            for name in PromptName
        ]

    def get_prompt(self, name: str) -> types.GetPromptResult:
        """Build the conversation for a prompt.

        Raises:
            UnknownPromptError: If the prompt name is not offered
        """
        try:
            prompt = PromptName(name)
        except ValueError:
            raise UnknownPromptError(name) from None

        if prompt is PromptName.BEST_PRACTICES:
            messages = [
                _message(
                    "user",
                    "I need to use AWS Cloudscape Design System correctly in my "
                    "application. Can you provide me with best practices?",
                ),
                _message("assistant", self.best_practices_text()),
            ]
        else:
            messages = [
                _message(
                    "user",
                    "What are the common design patterns used in AWS Console "
                    "applications with Cloudscape?",
                ),
                _message("assistant", CONSOLE_PATTERNS_TEXT),
            ]

        return types.GetPromptResult(description=PROMPT_DESCRIPTIONS[prompt], messages=messages)

    def best_practices_text(self) -> str:
        """Best practices from every component followed by general guidance."""
        component_practices = "\n".join(
            f"- **{component.name}:** {practice}"
            for component in self.catalog.all_components()
            for practice in component.best_practices
        )
        general = "\n".join(f"- {practice}" for practice in GENERAL_BEST_PRACTICES)
        return (
            "# AWS Cloudscape Design System Best Practices\n\n"
            "Here are key best practices for using Cloudscape components effectively:\n\n"
            f"## Component-Specific Best Practices\n\n{component_practices}\n\n"
            f"## General Best Practices\n\n{general}\n\n"
            "Which specific area would you like more guidance on?"
        )
