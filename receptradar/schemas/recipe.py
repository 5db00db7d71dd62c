"""Recipe suggestion schemas."""

from typing import Literal

from pydantic import BaseModel


class ExtendedIngredient(BaseModel):
    """Ingredient as shown on a recipe card."""

    name: str
    original: str | None = None  # Display line with amount and unit, if any


class RecipeSummary(BaseModel):
    """Card data shared by generated and saved web recipes."""

    id: str
    title: str
    image: str | None = None
    ready_in_minutes: int | None = None
    extended_ingredients: list[ExtendedIngredient] = []
    source_url: str | None = None


class RecipeMatch(BaseModel):
    """How much of a recipe the pantry covers."""

    have: int
    total: int
    missing: list[str]

    @property
    def ratio(self) -> float:
        return self.have / self.total if self.total > 0 else 0.0


class RecipeSuggestion(BaseModel):
    """A recipe card with its pantry match."""

    source: Literal["generated", "web"]
    recipe: RecipeSummary
    match: RecipeMatch


class SuggestionListResponse(BaseModel):
    """Ranked suggestions for the current pantry."""

    ingredients: list[str]
    provider_available: bool
    suggestions: list[RecipeSuggestion]


class RegenerateRequest(BaseModel):
    """Ask for a fresh batch of generated recipes."""

    include_image: bool | None = None  # Falls back to the llm_include_image setting
