"""Unit vocabulary used to tell a measurement token from the start of a name."""

# =============================================================================
# Unit Vocabulary
# =============================================================================

VOLUME_UNITS: frozenset[str] = frozenset(
    {
        "cup",
        "cups",
        "tablespoon",
        "tablespoons",
        "tbsp",
        "teaspoon",
        "teaspoons",
        "tsp",
        "milliliter",
        "milliliters",
        "ml",
        "liter",
        "liters",
        "l",
        "quart",
        "quarts",
        "pint",
        "pints",
        "gallon",
        "gallons",
    }
)

WEIGHT_UNITS: frozenset[str] = frozenset(
    {
        "ounce",
        "ounces",
        "oz",
        "pound",
        "pounds",
        "lb",
        "lbs",
        "gram",
        "grams",
        "g",
        "kilogram",
        "kilograms",
        "kg",
    }
)

# Count-based and "a little bit" units
COUNT_UNITS: frozenset[str] = frozenset(
    {
        "pinch",
        "dash",
        "clove",
        "cloves",
        "slice",
        "slices",
        "piece",
        "pieces",
        "can",
        "cans",
        "package",
        "packages",
        "bunch",
        "bunches",
        "stick",
        "sticks",
    }
)

UNIT_VOCABULARY: frozenset[str] = VOLUME_UNITS | WEIGHT_UNITS | COUNT_UNITS


def normalize_unit(token: str | None) -> str | None:
    """Lowercase and trim a unit token, mapping blanks to None."""
    if token is None:
        return None
    token = token.strip().lower()
    return token or None


def is_unit(token: str | None, vocabulary: frozenset[str] = UNIT_VOCABULARY) -> bool:
    """Check whether a token (any case) is a recognized unit."""
    normalized = normalize_unit(token)
    return normalized is not None and normalized in vocabulary
