"""Tokenize ingredient lines into quantity, unit and name."""

from recipesniper.normalize.tokenizer import extract_unit, parse_ingredient, parse_quantity
from recipesniper.normalize.units import UNIT_VOCABULARY, is_unit, normalize_unit

__all__ = [
    "UNIT_VOCABULARY",
    "extract_unit",
    "is_unit",
    "normalize_unit",
    "parse_ingredient",
    "parse_quantity",
]
