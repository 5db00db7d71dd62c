"""Favorites API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError

from receptradar.api.dependencies import get_favorites_service
from receptradar.schemas.favorite import FavoriteCreate, FavoriteRecipeData, FavoriteResponse
from receptradar.services.favorites_service import FavoritesService, to_response

router = APIRouter(prefix="/api/v1/favorites", tags=["favorites"])


@router.get("", response_model=list[FavoriteResponse])
def list_favorites(service: Annotated[FavoritesService, Depends(get_favorites_service)]):
    """List favorites, newest first."""
    return [to_response(favorite) for favorite in service.list_all()]


@router.post("", response_model=FavoriteResponse, status_code=status.HTTP_201_CREATED)
def create_favorite(
    favorite_data: FavoriteCreate,
    service: Annotated[FavoritesService, Depends(get_favorites_service)],
):
    """Favorite a web or generated recipe."""
    try:
        favorite = service.create(favorite_data)
    except IntegrityError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Recipe is already a favorite",
        ) from None
    return to_response(favorite)


@router.get("/{provider}/{recipe_id:path}", response_model=FavoriteResponse)
def get_favorite(
    provider: str,
    recipe_id: str,
    service: Annotated[FavoritesService, Depends(get_favorites_service)],
):
    """Check whether a recipe is a favorite."""
    favorite = service.get_by_recipe(provider, recipe_id)
    if not favorite:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Favorite not found")
    return to_response(favorite)


@router.put("/{provider}/{recipe_id:path}", response_model=FavoriteResponse)
def update_favorite_snapshot(
    provider: str,
    recipe_id: str,
    recipe_data: FavoriteRecipeData,
    service: Annotated[FavoritesService, Depends(get_favorites_service)],
):
    """Refresh the title/image snapshot shown in the favorites list."""
    favorite = service.update_recipe_data(provider, recipe_id, recipe_data)
    if not favorite:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Favorite not found")
    return to_response(favorite)


@router.delete("/{provider}/{recipe_id:path}", status_code=status.HTTP_204_NO_CONTENT)
def delete_favorite(
    provider: str,
    recipe_id: str,
    service: Annotated[FavoritesService, Depends(get_favorites_service)],
):
    if not service.delete_by_recipe(provider, recipe_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Favorite not found")
