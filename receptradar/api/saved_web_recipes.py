"""Saved web recipe API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from receptradar.api.dependencies import get_saved_web_recipe_service
from receptradar.schemas.saved_web_recipe import SavedWebRecipeCreate, SavedWebRecipeResponse
from receptradar.services.saved_web_recipe_service import SavedWebRecipeService

router = APIRouter(prefix="/api/v1/saved-web-recipes", tags=["saved-web-recipes"])


@router.get("", response_model=list[SavedWebRecipeResponse])
def list_saved_web_recipes(
    service: Annotated[SavedWebRecipeService, Depends(get_saved_web_recipe_service)],
    ingredient_query: str | None = None,
):
    """List bookmarked pages, newest first, optionally for one ingredient query."""
    if ingredient_query is not None:
        return service.get_by_ingredient_query(ingredient_query)
    return service.list_all()


@router.post("", response_model=SavedWebRecipeResponse, status_code=status.HTTP_201_CREATED)
def save_web_recipe(
    recipe_data: SavedWebRecipeCreate,
    service: Annotated[SavedWebRecipeService, Depends(get_saved_web_recipe_service)],
):
    """Bookmark a recipe page found on the web."""
    return service.save(
        source_url=recipe_data.source_url,
        title=recipe_data.title,
        image_url=recipe_data.image_url,
        ingredient_query=recipe_data.ingredient_query,
    )


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_saved_web_recipe(
    recipe_id: int,
    service: Annotated[SavedWebRecipeService, Depends(get_saved_web_recipe_service)],
):
    if not service.delete(recipe_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Saved recipe not found")
