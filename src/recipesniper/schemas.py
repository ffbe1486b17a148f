"""Request and response schemas for the HTTP API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from recipesniper.models import RecipeRecord, ShoppingListRecord

# =============================================================================
# Recipes
# =============================================================================


class AddRecipeRequest(BaseModel):
    """Register a fetched recipe page."""

    url: str = Field(description="Page URL the markup was fetched from")
    html: str = Field(default="", description="Raw page markup")
    title: str | None = Field(None, description="Page title; read from <title> if omitted")

    @field_validator("url", mode="before")
    @classmethod
    def require_url(cls, v: Any) -> str:
        """Reject blank URLs."""
        if v is None or not str(v).strip():
            raise ValueError("URL must not be blank")
        return str(v).strip()


class IngredientResponse(BaseModel):
    """A parsed ingredient line."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    quantity: str | None = None
    unit: str | None = None
    raw_text: str


class RecipeResponse(BaseModel):
    """Recipe summary."""

    id: int
    url: str
    title: str | None
    ingredient_count: int
    created_at: datetime

    @classmethod
    def from_record(cls, recipe: RecipeRecord) -> "RecipeResponse":
        return cls(
            id=recipe.id,
            url=recipe.url,
            title=recipe.title,
            ingredient_count=len(recipe.ingredients),
            created_at=recipe.created_at,
        )


class RecipeDetailResponse(BaseModel):
    """Recipe with its ingredients."""

    id: int
    url: str
    title: str | None
    created_at: datetime
    extraction_method: str | None = None
    ingredients: list[IngredientResponse]

    @classmethod
    def from_record(
        cls,
        recipe: RecipeRecord,
        extraction_method: str | None = None,
    ) -> "RecipeDetailResponse":
        return cls(
            id=recipe.id,
            url=recipe.url,
            title=recipe.title,
            created_at=recipe.created_at,
            extraction_method=extraction_method,
            ingredients=[IngredientResponse.model_validate(i) for i in recipe.ingredients],
        )


# =============================================================================
# Shopping lists
# =============================================================================


class CreateShoppingListRequest(BaseModel):
    """Build a shopping list from recipes."""

    name: str = Field(min_length=1)
    recipe_ids: list[int] = Field(min_length=1)


class AddRecipesToShoppingListRequest(BaseModel):
    """Add recipes to an existing shopping list."""

    recipe_ids: list[int] = Field(min_length=1)


class ShoppingListItemUpdate(BaseModel):
    """A caller-supplied shopping list line."""

    name: str = Field(min_length=1)
    quantity: str | None = None
    unit: str | None = None
    composed: bool = False


class UpdateShoppingListRequest(BaseModel):
    """Rename a shopping list and overwrite its items."""

    name: str = Field(min_length=1)
    items: list[ShoppingListItemUpdate] = Field(default_factory=list)


class ShoppingListItemResponse(BaseModel):
    """One line of a shopping list."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    quantity: str | None = None
    unit: str | None = None
    composed: bool = False


class ShoppingListResponse(BaseModel):
    """Shopping list summary."""

    id: int
    name: str
    recipe_count: int
    item_count: int
    created_at: datetime

    @classmethod
    def from_record(cls, shopping_list: ShoppingListRecord) -> "ShoppingListResponse":
        return cls(
            id=shopping_list.id,
            name=shopping_list.name,
            recipe_count=len(shopping_list.recipes),
            item_count=len(shopping_list.items),
            created_at=shopping_list.created_at,
        )


class ShoppingListDetailResponse(BaseModel):
    """Shopping list with its recipes and items."""

    id: int
    name: str
    created_at: datetime
    recipes: list[RecipeResponse]
    items: list[ShoppingListItemResponse]

    @classmethod
    def from_record(cls, shopping_list: ShoppingListRecord) -> "ShoppingListDetailResponse":
        return cls(
            id=shopping_list.id,
            name=shopping_list.name,
            created_at=shopping_list.created_at,
            recipes=[RecipeResponse.from_record(r) for r in shopping_list.recipes],
            items=[ShoppingListItemResponse.model_validate(i) for i in shopping_list.items],
        )
