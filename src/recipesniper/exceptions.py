"""Domain exceptions surfaced to callers of the shopping list core."""

from collections.abc import Sequence


class RecipeSniperError(Exception):
    """Base exception for recipesniper errors."""


class NoRecipesResolvedError(RecipeSniperError):
    """Raised when none of the requested recipe ids resolve to a recipe."""

    def __init__(self, recipe_ids: Sequence[int]):
        super().__init__(f"No valid recipes found for IDs: {list(recipe_ids)}")
        self.recipe_ids = list(recipe_ids)


class NotFoundError(RecipeSniperError):
    """Raised by a store when a referenced recipe or shopping list does not exist."""

    def __init__(self, kind: str, item_id: int):
        super().__init__(f"{kind} not found: {item_id}")
        self.kind = kind
        self.item_id = item_id
