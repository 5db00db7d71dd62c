"""Recipe suggestion and generation API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from receptradar.api.dependencies import get_generated_recipe_service, get_recipe_service
from receptradar.schemas.generated_recipe import GeneratedRecipeResponse
from receptradar.schemas.recipe import RegenerateRequest, SuggestionListResponse
from receptradar.services.generated_recipe_service import GeneratedRecipeService
from receptradar.services.llm import ProviderNotConfiguredError, RecipeProviderError
from receptradar.services.recipe_service import RecipeService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/recipes", tags=["recipes"])


@router.get("/suggestions", response_model=SuggestionListResponse)
async def list_suggestions(
    service: Annotated[RecipeService, Depends(get_recipe_service)],
    generate_if_empty: bool = False,
):
    """Recipes for the current pantry, ranked by pantry coverage then cooking time.

    With generate_if_empty, a pantry without any suggestions gets a first
    generated batch when a provider is configured.
    """
    if not generate_if_empty:
        return service.get_suggestions()
    try:
        return await service.get_suggestions_or_generate()
    except RecipeProviderError as e:
        logger.error(f"Recipe generation failed: {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e


@router.post("/regenerate", response_model=list[GeneratedRecipeResponse])
async def regenerate_recipes(
    service: Annotated[RecipeService, Depends(get_recipe_service)],
    request: RegenerateRequest | None = None,
):
    """Replace the generated batch for the current pantry.

    Favorited recipes from the previous batch are kept.
    """
    include_image = request.include_image if request else None
    try:
        return await service.regenerate(include_image=include_image)
    except ProviderNotConfiguredError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e)) from e
    except RecipeProviderError as e:
        logger.error(f"Recipe generation failed: {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e


@router.get("/generated/{recipe_id}", response_model=GeneratedRecipeResponse)
def get_generated_recipe(
    recipe_id: int,
    service: Annotated[GeneratedRecipeService, Depends(get_generated_recipe_service)],
):
    recipe = service.get_by_id(recipe_id)
    if not recipe:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")
    return recipe


@router.delete("/generated/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_generated_recipe(
    recipe_id: int,
    service: Annotated[GeneratedRecipeService, Depends(get_generated_recipe_service)],
):
    """Delete one generated recipe."""
    service.delete_by_id(recipe_id)
