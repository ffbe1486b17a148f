"""Base extractor interface for recipe page ingredient lists."""

from abc import ABC, abstractmethod

from bs4 import BeautifulSoup

from recipesniper.logging_config import get_logger
from recipesniper.models import ParsedIngredient
from recipesniper.normalize.tokenizer import parse_ingredient
from recipesniper.normalize.units import UNIT_VOCABULARY

logger = get_logger(__name__)


class IngredientExtractor(ABC):
    """Abstract base class for ingredient extraction strategies.

    A strategy reads an already-parsed page and returns the ingredient lines
    it recognizes, or an empty list when the page does not carry the kind of
    markup it understands.
    """

    # Override in subclasses
    METHOD: str = "unknown"

    def __init__(self, vocabulary: frozenset[str] = UNIT_VOCABULARY):
        """
        Initialize the extractor.

        Args:
            vocabulary: Unit tokens recognized after a leading quantity.
        """
        self.vocabulary = vocabulary

    @property
    def method(self) -> str:
        """Return the extraction method name reported to callers."""
        return self.METHOD

    @abstractmethod
    def extract(self, soup: BeautifulSoup) -> list[ParsedIngredient]:
        """
        Extract ingredients from a parsed page.

        Args:
            soup: The parsed page markup.

        Returns:
            List of parsed ingredients, empty if none were found.
        """
        pass

    def _parse_lines(self, lines: list[str]) -> list[ParsedIngredient]:
        """Tokenize raw lines, skipping blanks and lines that fail to parse."""
        ingredients = []
        for line in lines:
            raw = line.strip()
            if not raw:
                continue
            try:
                ingredients.append(parse_ingredient(raw, self.vocabulary))
            except Exception as e:
                logger.debug(f"Skipping unparsable ingredient line {raw!r}: {e}")
        return ingredients
