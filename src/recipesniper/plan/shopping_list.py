"""Shopping list assembly from stored recipes."""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from recipesniper.exceptions import NoRecipesResolvedError
from recipesniper.logging_config import get_logger
from recipesniper.models import RecipeRecord, ShoppingListLine, ShoppingListRecord
from recipesniper.plan.merger import QuantityMerger

logger = get_logger(__name__)


class RecipeRepository(ABC):
    """Recipe lookup the assembler resolves recipe ids through."""

    @abstractmethod
    def get_recipes(self, recipe_ids: Sequence[int]) -> list[RecipeRecord]:
        """
        Resolve recipe ids to recipes.

        Args:
            recipe_ids: Requested recipe ids.

        Returns:
            The recipes that exist, in requested order, without duplicates.
            Unknown ids are skipped.
        """
        pass


@dataclass(frozen=True)
class AssembledList:
    """A shopping list ready to be stored."""

    name: str
    lines: tuple[ShoppingListLine, ...]
    recipes: tuple[RecipeRecord, ...]


class ShoppingListAssembler:
    """
    Builds, extends and overwrites shopping lists.

    Every build re-runs the merger over the full set of entries, so a list
    is never patched incrementally:
    - create: ingredients of the resolved recipes
    - add_items: current lines first, then the new recipes' ingredients
    - replace_all: caller-supplied lines, installed without merging
    """

    def __init__(self, recipes: RecipeRepository, merger: QuantityMerger | None = None):
        self.recipes = recipes
        self.merger = merger or QuantityMerger()

    def _resolve(self, recipe_ids: Sequence[int]) -> list[RecipeRecord]:
        """Resolve ids, failing when none of them exist."""
        resolved = self.recipes.get_recipes(recipe_ids)
        if not resolved:
            raise NoRecipesResolvedError(recipe_ids)
        if len(resolved) != len(set(recipe_ids)):
            logger.warning(
                f"Some recipe IDs not found. Requested: {len(set(recipe_ids))}, "
                f"Found: {len(resolved)}"
            )
        return resolved

    @staticmethod
    def _ingredients(recipes: Iterable[RecipeRecord]) -> list[Any]:
        return [ingredient for recipe in recipes for ingredient in recipe.ingredients]

    def create(self, name: str, recipe_ids: Sequence[int]) -> AssembledList:
        """
        Build a new shopping list from recipes.

        Args:
            name: Shopping list name.
            recipe_ids: Recipes to pool ingredients from. Unknown ids are
                skipped as long as at least one resolves.

        Returns:
            The merged lines and the resolved recipes.

        Raises:
            NoRecipesResolvedError: If no id resolves to a recipe.
        """
        logger.info(f"Creating shopping list '{name}' from {len(recipe_ids)} recipes")

        recipes = self._resolve(recipe_ids)
        lines = self.merger.combine(self._ingredients(recipes))

        logger.info(f"Assembled shopping list '{name}' with {len(lines)} items")
        return AssembledList(name=name, lines=tuple(lines), recipes=tuple(recipes))

    def add_items(
        self,
        existing: ShoppingListRecord,
        new_recipe_ids: Sequence[int],
    ) -> AssembledList:
        """
        Extend a shopping list with more recipes.

        The current lines (in their current order) are merged again together
        with the new recipes' ingredients. Recipes already referenced by the
        list are not added twice, but their ingredients still count.

        Args:
            existing: The stored shopping list.
            new_recipe_ids: Recipes to add.

        Returns:
            The re-merged lines and the union of recipe references.

        Raises:
            NoRecipesResolvedError: If no new id resolves to a recipe.
        """
        logger.info(f"Adding {len(new_recipe_ids)} recipes to shopping list '{existing.name}'")

        new_recipes = self._resolve(new_recipe_ids)

        recipes = list(existing.recipes)
        referenced = {recipe.id for recipe in recipes}
        for recipe in new_recipes:
            if recipe.id not in referenced:
                recipes.append(recipe)
                referenced.add(recipe.id)

        lines = self.merger.combine([*existing.items, *self._ingredients(new_recipes)])

        logger.info(f"Shopping list '{existing.name}' now has {len(lines)} items")
        return AssembledList(name=existing.name, lines=tuple(lines), recipes=tuple(recipes))

    def replace_all(
        self,
        existing: ShoppingListRecord,
        explicit_lines: Iterable[Any],
        name: str | None = None,
    ) -> AssembledList:
        """
        Overwrite a shopping list's lines with caller-supplied ones.

        Lines are installed verbatim: nothing is merged, and same-named lines
        stay separate.

        Args:
            existing: The stored shopping list.
            explicit_lines: Entries exposing ``name``, ``quantity`` and ``unit``.
            name: Optional new list name.

        Returns:
            The new lines with the list's recipe references unchanged.
        """
        lines = tuple(
            ShoppingListLine(
                name=line.name,
                quantity=line.quantity,
                unit=line.unit,
                composed=bool(getattr(line, "composed", False)),
            )
            for line in explicit_lines
        )
        new_name = name if name is not None else existing.name

        logger.info(f"Replaced items of shopping list '{new_name}' with {len(lines)} items")
        return AssembledList(name=new_name, lines=lines, recipes=tuple(existing.recipes))
