"""FastAPI dependencies for services."""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from receptradar.database import get_db
from receptradar.services.favorites_service import FavoritesService
from receptradar.services.generated_recipe_service import GeneratedRecipeService
from receptradar.services.llm import LLMService
from receptradar.services.pantry_service import PantryService
from receptradar.services.recipe_service import RecipeService
from receptradar.services.saved_web_recipe_service import SavedWebRecipeService
from receptradar.services.settings_service import SettingsService


def get_llm_service(request: Request) -> LLMService:
    """Get LLM service instance configured with the app's settings."""
    return LLMService(request.app.state.settings)


def get_pantry_service(
    db: Annotated[Session, Depends(get_db)],
) -> PantryService:
    return PantryService(db)


def get_favorites_service(
    db: Annotated[Session, Depends(get_db)],
) -> FavoritesService:
    return FavoritesService(db)


def get_generated_recipe_service(
    db: Annotated[Session, Depends(get_db)],
) -> GeneratedRecipeService:
    return GeneratedRecipeService(db)


def get_saved_web_recipe_service(
    db: Annotated[Session, Depends(get_db)],
) -> SavedWebRecipeService:
    return SavedWebRecipeService(db)


def get_settings_service(
    db: Annotated[Session, Depends(get_db)],
) -> SettingsService:
    return SettingsService(db)


def get_recipe_service(
    db: Annotated[Session, Depends(get_db)],
    llm_service: Annotated[LLMService, Depends(get_llm_service)],
) -> RecipeService:
    """Get recipe service with dependencies."""
    return RecipeService(db, llm_service)
