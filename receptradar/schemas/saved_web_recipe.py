"""Saved web recipe schemas."""

from pydantic import BaseModel, ConfigDict, Field


class SavedWebRecipeCreate(BaseModel):
    """Bookmark an external recipe page."""

    source_url: str = Field(..., min_length=1)
    title: str | None = None
    image_url: str | None = None
    ingredient_query: str | None = None  # Pantry query the page was found with


class SavedWebRecipeResponse(BaseModel):
    """Saved web recipe response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str | None
    source_url: str
    image_url: str | None
    ingredient_query: str | None
    saved_at: int
