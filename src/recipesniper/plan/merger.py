"""Quantity merging for shopping list lines pooled from several recipes."""

import math
import re
from collections.abc import Iterable, Mapping
from typing import Any

from recipesniper.logging_config import get_logger
from recipesniper.models import ShoppingListLine

logger = get_logger(__name__)

COMPOSED_SEPARATOR = " + "

# Plain ASCII decimals: "2", "-1.5", ".5", "3.", "1e3"
DECIMAL_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$", re.ASCII)


def _field(item: Any, name: str) -> Any:
    """Read a field from a mapping or an attribute-style record."""
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _parse_decimal(value: str) -> float | None:
    """Parse a plain decimal number, returning None for anything else."""
    text = value.strip()
    if not DECIMAL_PATTERN.match(text):
        return None
    number = float(text)
    if not math.isfinite(number):
        return None
    return number


def sum_quantities(a: str | None, b: str | None) -> str | None:
    """
    Add two textual quantities.

    Examples:
        "2" + "3" -> "5"
        "1.5" + "1" -> "2.5"
        "1/2" + "1" -> "1/2 + 1"
        None + "3" -> "3"

    Args:
        a: Existing quantity text.
        b: Incoming quantity text.

    Returns:
        The sum as an integer or decimal string when both parse as decimal
        numbers, otherwise the two texts joined with " + ". A missing or
        blank side returns the other side unchanged.
    """
    if _is_blank(a):
        return b
    if _is_blank(b):
        return a

    first = _parse_decimal(a)
    second = _parse_decimal(b)
    if first is None or second is None:
        return f"{a}{COMPOSED_SEPARATOR}{b}"

    total = first + second
    if total.is_integer():
        return str(int(total))
    return str(total)


def format_quantity_unit(quantity: str | None, unit: str | None) -> str:
    """Join a quantity and unit, omitting whichever is missing."""
    return " ".join(part for part in (quantity, unit) if part)


class QuantityMerger:
    """
    Combines ingredient entries that share a name into shopping list lines.

    Names are grouped case-insensitively and lines come out in the order
    their name was first seen. For a repeated name:

    1. Same unit (ignoring case) or no unit on either side: quantities are summed.
    2. Unit on one side only: that unit is kept and quantities are summed.
    3. Two different units: nothing is summed; the quantity becomes
       "<qty> <unit> + <qty> <unit>", the unit is cleared and the line is
       marked composed.

    A composed line is never re-parsed or given a unit again: every later
    contribution is appended as another "<qty> <unit>" part.
    """

    def combine(self, items: Iterable[Any]) -> list[ShoppingListLine]:
        """
        Merge items into shopping list lines.

        Args:
            items: Entries exposing ``name``, ``quantity`` and ``unit``, either
                as attributes (ParsedIngredient, ShoppingListLine) or as
                mapping keys. A truthy ``composed`` field is carried over.

        Returns:
            New lines, one per distinct lowercase name.
        """
        merged: dict[str, ShoppingListLine] = {}
        total = 0

        for item in items:
            total += 1
            incoming = ShoppingListLine(
                name=_field(item, "name") or "",
                quantity=_field(item, "quantity"),
                unit=_field(item, "unit"),
                composed=bool(_field(item, "composed")),
            )
            key = incoming.merge_key

            existing = merged.get(key)
            if existing is None:
                merged[key] = incoming
            else:
                merged[key] = self.merge_pair(existing, incoming)

        logger.debug(f"Combined {total} items into {len(merged)} lines")
        return list(merged.values())

    def merge_pair(
        self,
        existing: ShoppingListLine,
        incoming: ShoppingListLine,
    ) -> ShoppingListLine:
        """Merge one incoming entry into the line already holding its name."""
        if existing.composed or incoming.composed:
            return self._compose(existing, incoming)

        existing_unit = existing.unit.lower() if existing.unit is not None else None
        incoming_unit = incoming.unit.lower() if incoming.unit is not None else None

        if existing_unit == incoming_unit:
            return ShoppingListLine(
                name=existing.name,
                quantity=sum_quantities(existing.quantity, incoming.quantity),
                unit=existing.unit,
            )

        if existing_unit is None or incoming_unit is None:
            return ShoppingListLine(
                name=existing.name,
                quantity=sum_quantities(existing.quantity, incoming.quantity),
                unit=existing.unit if existing.unit is not None else incoming.unit,
            )

        return self._compose(existing, incoming)

    @staticmethod
    def _compose(existing: ShoppingListLine, incoming: ShoppingListLine) -> ShoppingListLine:
        """Join both sides as "<qty> <unit>" parts without summing."""
        parts = [
            part
            for part in (
                format_quantity_unit(existing.quantity, existing.unit),
                format_quantity_unit(incoming.quantity, incoming.unit),
            )
            if part
        ]
        return ShoppingListLine(
            name=existing.name,
            quantity=COMPOSED_SEPARATOR.join(parts) or None,
            unit=None,
            composed=True,
        )
