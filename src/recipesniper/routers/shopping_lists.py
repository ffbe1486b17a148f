"""API routes for building and editing shopping lists."""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from recipesniper.exceptions import NoRecipesResolvedError, NotFoundError
from recipesniper.logging_config import LoggingContext, get_logger
from recipesniper.plan.shopping_list import ShoppingListAssembler
from recipesniper.schemas import (
    AddRecipesToShoppingListRequest,
    CreateShoppingListRequest,
    ShoppingListDetailResponse,
    ShoppingListResponse,
    UpdateShoppingListRequest,
)
from recipesniper.store import InMemoryStore, get_store

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/shopping-lists", tags=["shopping-lists"])


def get_assembler(store: InMemoryStore = Depends(get_store)) -> ShoppingListAssembler:
    """Get a shopping list assembler backed by the store."""
    return ShoppingListAssembler(store)


def _not_found(e: NotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


def _no_recipes(e: NoRecipesResolvedError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("", response_model=ShoppingListDetailResponse, status_code=status.HTTP_201_CREATED)
async def create_shopping_list(
    request: CreateShoppingListRequest,
    store: InMemoryStore = Depends(get_store),
    assembler: ShoppingListAssembler = Depends(get_assembler),
) -> ShoppingListDetailResponse:
    """
    Create a shopping list from recipes.

    Ingredients with the same name (ignoring case) are combined into one
    line. Unknown recipe ids are skipped; at least one must exist.
    """
    try:
        assembled = assembler.create(request.name, request.recipe_ids)
    except NoRecipesResolvedError as e:
        raise _no_recipes(e) from e

    saved = store.save_shopping_list(assembled)
    with LoggingContext(shopping_list_id=saved.id):
        logger.info(f"Created shopping list '{saved.name}' with {len(saved.items)} items")
    return ShoppingListDetailResponse.from_record(saved)


@router.get("", response_model=list[ShoppingListResponse])
async def list_shopping_lists(
    store: InMemoryStore = Depends(get_store),
) -> list[ShoppingListResponse]:
    """List all shopping lists."""
    return [ShoppingListResponse.from_record(sl) for sl in store.list_shopping_lists()]


@router.get("/{list_id}", response_model=ShoppingListDetailResponse)
async def get_shopping_list(
    list_id: int,
    store: InMemoryStore = Depends(get_store),
) -> ShoppingListDetailResponse:
    """Get a shopping list with its recipes and items."""
    try:
        shopping_list = store.get_shopping_list(list_id)
    except NotFoundError as e:
        raise _not_found(e) from e
    return ShoppingListDetailResponse.from_record(shopping_list)


@router.put("/{list_id}", response_model=ShoppingListDetailResponse)
async def update_shopping_list(
    list_id: int,
    request: UpdateShoppingListRequest,
    store: InMemoryStore = Depends(get_store),
    assembler: ShoppingListAssembler = Depends(get_assembler),
) -> ShoppingListDetailResponse:
    """Rename a shopping list and overwrite its items exactly as given."""
    with LoggingContext(shopping_list_id=list_id):
        try:
            existing = store.get_shopping_list(list_id)
            assembled = assembler.replace_all(existing, request.items, name=request.name)
            saved = store.save_shopping_list(assembled, list_id=list_id)
        except NotFoundError as e:
            raise _not_found(e) from e

    return ShoppingListDetailResponse.from_record(saved)


@router.post("/{list_id}/recipes", response_model=ShoppingListDetailResponse)
async def add_recipes_to_shopping_list(
    list_id: int,
    request: AddRecipesToShoppingListRequest,
    store: InMemoryStore = Depends(get_store),
    assembler: ShoppingListAssembler = Depends(get_assembler),
) -> ShoppingListDetailResponse:
    """Add recipes to a shopping list and re-combine all of its items."""
    with LoggingContext(shopping_list_id=list_id):
        try:
            existing = store.get_shopping_list(list_id)
            assembled = assembler.add_items(existing, request.recipe_ids)
            saved = store.save_shopping_list(assembled, list_id=list_id)
        except NotFoundError as e:
            raise _not_found(e) from e
        except NoRecipesResolvedError as e:
            raise _no_recipes(e) from e

    return ShoppingListDetailResponse.from_record(saved)


@router.delete("/{list_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_shopping_list(
    list_id: int,
    store: InMemoryStore = Depends(get_store),
) -> Response:
    """Delete a shopping list."""
    try:
        store.delete_shopping_list(list_id)
    except NotFoundError as e:
        raise _not_found(e) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
