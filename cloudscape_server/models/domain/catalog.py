"""Catalog domain models: components, patterns and categories."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ComponentCategory(str, Enum):
    """Closed set of Cloudscape component categories."""

    CONTAINER = "Container"
    NAVIGATION = "Navigation"
    FORM = "Form"
    TABLE = "Table"
    CHART = "Chart"
    TEXT = "Text"
    NOTIFICATION = "Notification"
    OVERLAY = "Overlay"
    OTHER = "Other"


class Example(BaseModel):
    """A titled code example for a component."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    code: str


class ComponentLinks(BaseModel):
    """Documentation links for a component."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    documentation: str
    design_guidelines: str | None = Field(default=None, alias="designGuidelines")


class Component(BaseModel):
    """A documented Cloudscape UI component."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., min_length=1)
    name: str
    description: str
    usage: str
    examples: tuple[Example, ...] = ()
    category: ComponentCategory
    best_practices: tuple[str, ...] = Field(default=(), alias="bestPractices")
    links: ComponentLinks


class Pattern(BaseModel):
    """A Cloudscape design pattern."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    description: str
    usage: str


class RecommendationRule(BaseModel):
    """Keywords that point a use case at a component."""

    model_config = ConfigDict(frozen=True)

    component_id: str = Field(..., min_length=1)
    keywords: tuple[str, ...]

    @field_validator("keywords")
    @classmethod
    def validate_keywords(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Reject empty keywords, which would match every use case."""
        if any(not keyword for keyword in v):
            raise ValueError("keywords must be non-empty strings")
        return v


__all__ = [
    "ComponentCategory",
    "Example",
    "ComponentLinks",
    "Component",
    "Pattern",
    "RecommendationRule",
]
