"""Core domain models for the Cloudscape catalog."""

from cloudscape_server.models.domain.catalog import *

__all__ = [
    "ComponentCategory",
    "Example",
    "ComponentLinks",
    "Component",
    "Pattern",
    "RecommendationRule",
]
