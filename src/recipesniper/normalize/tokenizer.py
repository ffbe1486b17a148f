"""Leading quantity and unit tokenizer for free-text ingredient lines."""

import re

from recipesniper.models import ParsedIngredient
from recipesniper.normalize.units import UNIT_VOCABULARY, is_unit, normalize_unit

# Alternatives are tried left to right: "1 1/2", "1/2", "0.5", "2"
QUANTITY_PATTERN = re.compile(
    r"^(\d+\s+\d+/\d+|\d+/\d+|\d+\.\d+|\d+)\s*(.*)$",
    re.ASCII | re.DOTALL,
)


def parse_quantity(raw: str) -> tuple[str | None, str]:
    """
    Split a leading quantity off an ingredient line.

    Handles formats like:
    - "1 1/2 cups milk" (mixed number)
    - "1/2 tsp salt" (fraction)
    - "0.5 kg potatoes" (decimal)
    - "2 eggs" (integer)

    Args:
        raw: Raw ingredient text.

    Returns:
        Tuple of (quantity, remainder). The quantity keeps its original
        textual form; it is None when the line does not start with one, in
        which case the remainder is the whole trimmed input.
    """
    text = raw.strip()
    match = QUANTITY_PATTERN.match(text)
    if not match:
        return None, text
    return match.group(1).strip(), match.group(2).strip()


def extract_unit(
    remainder: str,
    vocabulary: frozenset[str] = UNIT_VOCABULARY,
) -> tuple[str | None, str]:
    """
    Split a leading unit token off the text following a quantity.

    The first token only counts as a unit when something follows it, so
    "2 cups" keeps "cups" as the name.

    Returns:
        Tuple of (unit, name) with the unit lowercased, or (None, remainder).
    """
    words = remainder.strip().split(None, 1)
    if len(words) == 2 and is_unit(words[0], vocabulary):
        return normalize_unit(words[0]), words[1].strip()
    return None, remainder.strip()


def parse_ingredient(
    raw: str,
    vocabulary: frozenset[str] = UNIT_VOCABULARY,
) -> ParsedIngredient:
    """Tokenize one ingredient line into a ParsedIngredient."""
    quantity, remainder = parse_quantity(raw)
    if quantity is None:
        return ParsedIngredient(name=remainder, raw_text=raw)

    unit, name = extract_unit(remainder, vocabulary)
    return ParsedIngredient(name=name, quantity=quantity, unit=unit, raw_text=raw)
