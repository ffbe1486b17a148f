"""Shopping list merging and assembly."""

from recipesniper.plan.merger import QuantityMerger, sum_quantities
from recipesniper.plan.shopping_list import (
    AssembledList,
    RecipeRepository,
    ShoppingListAssembler,
)

__all__ = [
    "AssembledList",
    "QuantityMerger",
    "RecipeRepository",
    "ShoppingListAssembler",
    "sum_quantities",
]
