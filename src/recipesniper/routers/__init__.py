"""API routers for the recipesniper application."""

from recipesniper.routers.recipes import router as recipes_router
from recipesniper.routers.shopping_lists import router as shopping_lists_router

__all__ = [
    "recipes_router",
    "shopping_lists_router",
]
