"""Ingredient extraction pipeline for recipe page markup."""

from dataclasses import dataclass

from bs4 import BeautifulSoup

from recipesniper.config import get_settings
from recipesniper.ingest.extractors import IngredientExtractor, default_extractors
from recipesniper.logging_config import get_logger
from recipesniper.models import ParsedIngredient

logger = get_logger(__name__)


@dataclass(frozen=True)
class ExtractionResult:
    """Ingredients extracted from one page and the strategy that found them."""

    method: str
    ingredients: tuple[ParsedIngredient, ...] = ()
    title: str | None = None

    @property
    def count(self) -> int:
        """Number of extracted ingredients."""
        return len(self.ingredients)


class IngredientExtractionPipeline:
    """
    Extracts ingredient lines from recipe page markup.

    Strategies are tried in order (JSON-LD metadata first, then CSS
    selectors); the first one that yields at least one ingredient wins. When
    none do, the last strategy's (possibly empty) result is returned.

    Extraction never raises: malformed markup, broken metadata or a failing
    strategy all degrade to zero ingredients for that source.
    """

    def __init__(
        self,
        extractors: tuple[IngredientExtractor, ...] | None = None,
        html_parser: str | None = None,
        max_markup_chars: int | None = None,
    ):
        settings = get_settings()
        self.extractors = extractors if extractors is not None else default_extractors()
        self.html_parser = html_parser or settings.html_parser
        self.max_markup_chars = max_markup_chars or settings.max_markup_chars

    def _parse(self, page_markup: str) -> BeautifulSoup:
        """Parse markup, truncating oversized pages."""
        if len(page_markup) > self.max_markup_chars:
            logger.warning(
                f"Markup is {len(page_markup)} chars, truncating to {self.max_markup_chars}"
            )
            page_markup = page_markup[: self.max_markup_chars]
        return BeautifulSoup(page_markup, self.html_parser)

    def extract(self, page_markup: str) -> list[ParsedIngredient]:
        """
        Extract ingredients from page markup.

        Args:
            page_markup: Raw HTML of a recipe page.

        Returns:
            List of parsed ingredients, empty if nothing was recognized.
        """
        return list(self.extract_with_method(page_markup).ingredients)

    def extract_with_method(self, page_markup: str) -> ExtractionResult:
        """
        Extract ingredients and report which strategy produced them.

        Args:
            page_markup: Raw HTML of a recipe page.

        Returns:
            ExtractionResult with the method name, ingredients and page title.
        """
        fallback_method = self.extractors[-1].method if self.extractors else "none"

        try:
            soup = self._parse(page_markup or "")
        except Exception:
            logger.exception("Failed to parse page markup")
            return ExtractionResult(method=fallback_method)

        title = self._title(soup)
        result = ExtractionResult(method=fallback_method, title=title)
        for extractor in self.extractors:
            try:
                ingredients = extractor.extract(soup)
            except Exception:
                logger.exception(f"Extractor {extractor.method!r} failed")
                ingredients = []

            result = ExtractionResult(
                method=extractor.method,
                ingredients=tuple(ingredients),
                title=title,
            )
            if ingredients:
                break

        logger.info(f"Extracted {result.count} ingredients via {result.method}")
        return result

    def extract_title(self, page_markup: str) -> str | None:
        """Get the trimmed page <title>, or None if there is none."""
        try:
            soup = self._parse(page_markup or "")
        except Exception:
            logger.exception("Failed to parse page markup")
            return None

        return self._title(soup)

    @staticmethod
    def _title(soup: BeautifulSoup) -> str | None:
        if soup.title is None:
            return None
        return soup.title.get_text(strip=True) or None
