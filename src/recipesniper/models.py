"""Domain records shared by extraction, merging and the store."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ParsedIngredient:
    """A single ingredient line split into quantity, unit and name.

    ``quantity`` keeps its textual form ("1 1/2", "0.5") and ``unit`` is only
    set when a quantity was found in front of it.
    """

    name: str
    quantity: str | None = None
    unit: str | None = None
    raw_text: str = ""


@dataclass(frozen=True)
class ShoppingListLine:
    """One merged line of a shopping list.

    ``composed`` marks a quantity built from parts with different units, such
    as "2 tbsp + 1 cup"; those parts are kept as text and never summed.
    """

    name: str
    quantity: str | None = None
    unit: str | None = None
    composed: bool = False

    @property
    def merge_key(self) -> str:
        """Case-insensitive key used to group lines for combination."""
        return self.name.lower()


@dataclass(frozen=True)
class RecipeRecord:
    """A recipe page with the ingredients extracted from it."""

    id: int
    url: str
    title: str | None
    ingredients: tuple[ParsedIngredient, ...] = ()
    created_at: datetime = field(default_factory=_utcnow)


@dataclass
class ShoppingListRecord:
    """A stored shopping list and the recipes it was built from."""

    id: int
    name: str
    recipes: list[RecipeRecord] = field(default_factory=list)
    items: list[ShoppingListLine] = field(default_factory=list)
    created_at: datetime = field(default_factory=_utcnow)

