"""Ingredient extraction strategies for recipe pages.

Strategies are tried in order; the first one that finds ingredients wins.
"""

from recipesniper.ingest.extractors.base import IngredientExtractor
from recipesniper.ingest.extractors.markup import INGREDIENT_SELECTORS, MarkupFallbackExtractor
from recipesniper.ingest.extractors.structured import StructuredSourceExtractor

__all__ = [
    "INGREDIENT_SELECTORS",
    "IngredientExtractor",
    "MarkupFallbackExtractor",
    "StructuredSourceExtractor",
    "default_extractors",
]


def default_extractors() -> tuple[IngredientExtractor, ...]:
    """Get the standard strategy order: JSON-LD metadata, then markup selectors."""
    return (StructuredSourceExtractor(), MarkupFallbackExtractor())
