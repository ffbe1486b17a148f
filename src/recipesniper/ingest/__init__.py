"""Ingredient extraction from recipe page markup."""

from recipesniper.ingest.pipeline import ExtractionResult, IngredientExtractionPipeline

__all__ = [
    "ExtractionResult",
    "IngredientExtractionPipeline",
]
