"""API routes for registering recipe pages and reading their ingredients."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from recipesniper.exceptions import NotFoundError
from recipesniper.ingest.pipeline import IngredientExtractionPipeline
from recipesniper.logging_config import LoggingContext, get_logger
from recipesniper.schemas import AddRecipeRequest, RecipeDetailResponse, RecipeResponse
from recipesniper.store import InMemoryStore, get_store

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/recipes", tags=["recipes"])

_pipeline: IngredientExtractionPipeline | None = None


def get_pipeline() -> IngredientExtractionPipeline:
    """Get the shared extraction pipeline."""
    global _pipeline
    if _pipeline is None:
        _pipeline = IngredientExtractionPipeline()
    return _pipeline


# Sync handler: FastAPI runs it in the threadpool, off the event loop
@router.post("", response_model=RecipeDetailResponse, status_code=status.HTTP_201_CREATED)
def add_recipe(
    request: AddRecipeRequest,
    store: InMemoryStore = Depends(get_store),
    pipeline: IngredientExtractionPipeline = Depends(get_pipeline),
) -> RecipeDetailResponse:
    """
    Register a recipe page.

    Ingredients are extracted from the supplied markup: JSON-LD recipe
    metadata when present, otherwise common ingredient list selectors. A page
    with no recognizable ingredients is still stored, with an empty list.
    """
    logger.info(f"Adding recipe from URL: {request.url}")

    result = pipeline.extract_with_method(request.html)
    title = request.title or result.title
    recipe = store.add_recipe(url=request.url, title=title, ingredients=result.ingredients)

    with LoggingContext(recipe_id=recipe.id):
        logger.info(f"Stored {result.count} ingredients extracted via {result.method}")

    return RecipeDetailResponse.from_record(recipe, extraction_method=result.method)


@router.get("", response_model=list[RecipeResponse])
async def list_recipes(
    q: Annotated[str | None, Query(description="Filter by title (partial match)")] = None,
    store: InMemoryStore = Depends(get_store),
) -> list[RecipeResponse]:
    """List recipes, optionally filtered by title."""
    recipes = store.search_recipes(q) if q else store.list_recipes()
    return [RecipeResponse.from_record(recipe) for recipe in recipes]


@router.get("/{recipe_id}", response_model=RecipeDetailResponse)
async def get_recipe(
    recipe_id: int,
    store: InMemoryStore = Depends(get_store),
) -> RecipeDetailResponse:
    """Get a recipe with its parsed ingredients."""
    try:
        recipe = store.get_recipe(recipe_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return RecipeDetailResponse.from_record(recipe)


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_recipe(
    recipe_id: int,
    store: InMemoryStore = Depends(get_store),
) -> Response:
    """Delete a recipe."""
    try:
        store.delete_recipe(recipe_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
