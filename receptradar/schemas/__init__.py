"""Pydantic schemas for API request/response validation."""

from receptradar.schemas.favorite import FavoriteCreate, FavoriteRecipeData, FavoriteResponse
from receptradar.schemas.generated_recipe import (
    GeneratedIngredient,
    GeneratedRecipeCreate,
    GeneratedRecipePayload,
    GeneratedRecipeResponse,
    GeneratedStep,
)
from receptradar.schemas.pantry import PantryItemCreate, PantryItemResponse, PantryItemUpdate
from receptradar.schemas.recipe import (
    ExtendedIngredient,
    RecipeMatch,
    RecipeSuggestion,
    RecipeSummary,
    RegenerateRequest,
    SuggestionListResponse,
)
from receptradar.schemas.saved_web_recipe import SavedWebRecipeCreate, SavedWebRecipeResponse
from receptradar.schemas.setting import SettingResponse, SettingValue

__all__ = [
    "FavoriteCreate",
    "FavoriteRecipeData",
    "FavoriteResponse",
    "GeneratedIngredient",
    "GeneratedRecipeCreate",
    "GeneratedRecipePayload",
    "GeneratedRecipeResponse",
    "GeneratedStep",
    "PantryItemCreate",
    "PantryItemResponse",
    "PantryItemUpdate",
    "ExtendedIngredient",
    "RecipeMatch",
    "RecipeSuggestion",
    "RecipeSummary",
    "RegenerateRequest",
    "SuggestionListResponse",
    "SavedWebRecipeCreate",
    "SavedWebRecipeResponse",
    "SettingResponse",
    "SettingValue",
]
