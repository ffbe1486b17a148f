"""JSON-LD (schema.org Recipe) ingredient extraction."""

import json
from typing import Any

from bs4 import BeautifulSoup

from recipesniper.ingest.extractors.base import IngredientExtractor
from recipesniper.logging_config import get_logger
from recipesniper.models import ParsedIngredient

logger = get_logger(__name__)

RECIPE_TYPE = "Recipe"


def is_recipe_node(node: Any) -> bool:
    """Check whether a JSON-LD node declares the Recipe type."""
    if not isinstance(node, dict):
        return False
    node_type = node.get("@type")
    if isinstance(node_type, str):
        return node_type == RECIPE_TYPE
    if isinstance(node_type, list):
        return RECIPE_TYPE in node_type
    return False


def find_recipe_node(root: Any) -> dict[str, Any] | None:
    """
    Locate the Recipe node inside one JSON-LD document.

    Looks at the document itself, then at the members of an ``@graph``
    wrapper, then at the members of a top-level array.
    """
    if is_recipe_node(root):
        return root

    if isinstance(root, dict):
        graph = root.get("@graph")
        if isinstance(graph, list):
            for item in graph:
                if is_recipe_node(item):
                    return item

    if isinstance(root, list):
        for item in root:
            if is_recipe_node(item):
                return item

    return None


class StructuredSourceExtractor(IngredientExtractor):
    """Reads ``recipeIngredient`` from embedded JSON-LD metadata blocks."""

    METHOD = "structured"
    SCRIPT_TYPE = "application/ld+json"

    def extract(self, soup: BeautifulSoup) -> list[ParsedIngredient]:
        for index, script in enumerate(soup.find_all("script", type=self.SCRIPT_TYPE)):
            text = script.string or script.get_text()
            try:
                root = json.loads(text)
            except (TypeError, ValueError) as e:
                logger.debug(f"Failed to parse JSON-LD block {index}: {e}")
                continue

            recipe = find_recipe_node(root)
            if recipe is None:
                continue

            ingredients = self._parse_lines(self._ingredient_lines(recipe))
            if ingredients:
                return ingredients

        return []

    @staticmethod
    def _ingredient_lines(recipe: dict[str, Any]) -> list[str]:
        """Get the raw ingredient strings from a Recipe node."""
        entries = recipe.get("recipeIngredient")
        if not isinstance(entries, list):
            return []
        return [
            entry if isinstance(entry, str) else str(entry)
            for entry in entries
            if entry is not None
        ]
