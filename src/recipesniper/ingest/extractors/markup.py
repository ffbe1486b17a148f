"""CSS selector fallback for pages without recipe metadata."""

from bs4 import BeautifulSoup

from recipesniper.ingest.extractors.base import IngredientExtractor
from recipesniper.logging_config import get_logger
from recipesniper.models import ParsedIngredient

logger = get_logger(__name__)

# Most specific first: WP Recipe Maker, generic containers, class substring,
# then schema.org microdata.
INGREDIENT_SELECTORS: tuple[str, ...] = (
    ".wprm-recipe-ingredients li",
    ".recipe-ingredients li",
    ".ingredients li",
    "[class*=ingredient] li",
    "[itemprop=recipeIngredient]",
)


class MarkupFallbackExtractor(IngredientExtractor):
    """Reads ingredient list items using the first selector that matches."""

    METHOD = "fallback"

    def __init__(
        self,
        selectors: tuple[str, ...] = INGREDIENT_SELECTORS,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.selectors = selectors

    def extract(self, soup: BeautifulSoup) -> list[ParsedIngredient]:
        for selector in self.selectors:
            elements = soup.select(selector)
            if not elements:
                continue

            logger.debug(f"Selector {selector!r} matched {len(elements)} elements")
            lines = [" ".join(el.get_text(separator=" ").split()) for el in elements]
            return self._parse_lines(lines)

        return []
