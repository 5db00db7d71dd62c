"""SQLAlchemy models."""

from receptradar.models.cache import ProductCacheEntry, RecipeCacheEntry
from receptradar.models.favorite import Favorite
from receptradar.models.generated_recipe import GeneratedRecipe
from receptradar.models.pantry import PantryItem
from receptradar.models.saved_web_recipe import SavedWebRecipe
from receptradar.models.setting import Setting

__all__ = [
    "PantryItem",
    "Favorite",
    "GeneratedRecipe",
    "SavedWebRecipe",
    "ProductCacheEntry",
    "RecipeCacheEntry",
    "Setting",
]
