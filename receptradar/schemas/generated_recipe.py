"""Generated recipe schemas."""

from pydantic import BaseModel, ConfigDict, Field


class GeneratedIngredient(BaseModel):
    """Ingredient line of a generated recipe."""

    name: str
    amount: int | float | str | None = None
    unit: str | None = None


class GeneratedStep(BaseModel):
    """Instruction step of a generated recipe."""

    step_number: int | None = None
    instruction: str


class GeneratedRecipePayload(BaseModel):
    """Recipe as returned by the generation provider."""

    title: str = Field(..., min_length=1)
    ingredients: list[GeneratedIngredient] = []
    steps: list[GeneratedStep] = []
    servings: int | None = None
    ready_in_minutes: int | None = None
    image_path: str | None = None  # Local file, only ever set on the first payload


class GeneratedRecipeCreate(BaseModel):
    """Generated recipe to store under an ingredient cache key."""

    ingredient_cache_key: str
    title: str = Field(..., min_length=1)
    ingredients: list[GeneratedIngredient] = []
    steps: list[GeneratedStep] = []
    servings: int | None = None
    ready_in_minutes: int | None = None
    image_path: str | None = None


class GeneratedRecipeResponse(BaseModel):
    """Stored generated recipe with parsed ingredients and steps."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    ingredient_cache_key: str
    title: str
    ingredients: list[GeneratedIngredient]
    steps: list[GeneratedStep]
    servings: int | None
    ready_in_minutes: int | None
    image_path: str | None
    created_at: int
