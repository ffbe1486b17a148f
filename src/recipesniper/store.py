"""Recipe and shopping list store collaborators."""

import threading
from collections.abc import Iterable, Sequence

from recipesniper.exceptions import NotFoundError
from recipesniper.logging_config import get_logger
from recipesniper.models import ParsedIngredient, RecipeRecord, ShoppingListRecord
from recipesniper.plan.shopping_list import AssembledList, RecipeRepository

logger = get_logger(__name__)


class InMemoryStore(RecipeRepository):
    """Process-local store for recipes and shopping lists.

    Assigns sequential ids and raises NotFoundError for unknown ids. All
    access goes through a single lock so the store can back a threaded
    server.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._recipes: dict[int, RecipeRecord] = {}
        self._lists: dict[int, ShoppingListRecord] = {}
        self._next_recipe_id = 1
        self._next_list_id = 1

    # =========================================================================
    # Recipes
    # =========================================================================

    def add_recipe(
        self,
        url: str,
        title: str | None,
        ingredients: Iterable[ParsedIngredient],
    ) -> RecipeRecord:
        """Store a recipe and assign it an id."""
        with self._lock:
            recipe = RecipeRecord(
                id=self._next_recipe_id,
                url=url,
                title=title,
                ingredients=tuple(ingredients),
            )
            self._recipes[recipe.id] = recipe
            self._next_recipe_id += 1

        logger.info(f"Saved recipe '{recipe.title}' with {len(recipe.ingredients)} ingredients")
        return recipe

    def get_recipe(self, recipe_id: int) -> RecipeRecord:
        with self._lock:
            recipe = self._recipes.get(recipe_id)
        if recipe is None:
            raise NotFoundError("Recipe", recipe_id)
        return recipe

    def get_recipes(self, recipe_ids: Sequence[int]) -> list[RecipeRecord]:
        with self._lock:
            found: dict[int, RecipeRecord] = {}
            for recipe_id in recipe_ids:
                recipe = self._recipes.get(recipe_id)
                if recipe is not None and recipe_id not in found:
                    found[recipe_id] = recipe
        return list(found.values())

    def list_recipes(self) -> list[RecipeRecord]:
        with self._lock:
            return list(self._recipes.values())

    def search_recipes(self, query: str) -> list[RecipeRecord]:
        """Find recipes whose title contains the query, ignoring case."""
        needle = query.lower()
        with self._lock:
            return [
                recipe
                for recipe in self._recipes.values()
                if recipe.title and needle in recipe.title.lower()
            ]

    def delete_recipe(self, recipe_id: int) -> None:
        with self._lock:
            if recipe_id not in self._recipes:
                raise NotFoundError("Recipe", recipe_id)
            del self._recipes[recipe_id]
        logger.info(f"Deleted recipe {recipe_id}")

    # =========================================================================
    # Shopping lists
    # =========================================================================

    def save_shopping_list(
        self,
        assembled: AssembledList,
        list_id: int | None = None,
    ) -> ShoppingListRecord:
        """
        Insert a new shopping list or overwrite an existing one.

        Args:
            assembled: Output of the shopping list assembler.
            list_id: Id of the list to overwrite, or None to insert.

        Returns:
            The stored shopping list.

        Raises:
            NotFoundError: If list_id does not exist.
        """
        with self._lock:
            if list_id is None:
                record = ShoppingListRecord(id=self._next_list_id, name=assembled.name)
                self._next_list_id += 1
            else:
                record = self._lists.get(list_id)
                if record is None:
                    raise NotFoundError("Shopping list", list_id)
                record.name = assembled.name

            record.recipes = list(assembled.recipes)
            record.items = list(assembled.lines)
            self._lists[record.id] = record

        logger.info(f"Saved shopping list '{record.name}' with {len(record.items)} items")
        return record

    def get_shopping_list(self, list_id: int) -> ShoppingListRecord:
        with self._lock:
            record = self._lists.get(list_id)
        if record is None:
            raise NotFoundError("Shopping list", list_id)
        return record

    def list_shopping_lists(self) -> list[ShoppingListRecord]:
        with self._lock:
            return list(self._lists.values())

    def delete_shopping_list(self, list_id: int) -> None:
        with self._lock:
            if list_id not in self._lists:
                raise NotFoundError("Shopping list", list_id)
            del self._lists[list_id]
        logger.info(f"Deleted shopping list {list_id}")


# Global instance for dependency injection
_store: InMemoryStore | None = None


def get_store() -> InMemoryStore:
    """Get the global InMemoryStore instance, creating it on first use."""
    global _store
    if _store is None:
        _store = InMemoryStore()
    return _store


def reset_store() -> None:
    """Drop the global InMemoryStore so the next call starts empty."""
    global _store
    _store = None
