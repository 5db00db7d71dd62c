"""Favorite schemas."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class FavoriteRecipeData(BaseModel):
    """Snapshot shown on the favorites screen without loading the recipe."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    image: str | None = None
    source_url: str | None = Field(None, alias="sourceUrl")


class FavoriteCreate(BaseModel):
    """Favorite a recipe."""

    provider: Literal["web", "generated"]
    recipe_id: str = Field(..., min_length=1)
    recipe_data: FavoriteRecipeData | None = None


class FavoriteResponse(BaseModel):
    """Favorite response."""

    id: int
    provider: str
    recipe_id: str
    recipe_data: FavoriteRecipeData | None
    added_at: int
