"""Pantry schemas."""

from pydantic import BaseModel, ConfigDict, Field


class PantryItemCreate(BaseModel):
    """Create a pantry item."""

    name: str = Field(..., min_length=1, max_length=255)
    category: str | None = Field(None, max_length=100)
    barcode: str | None = Field(None, max_length=64)
    quantity: float | None = None
    unit: str | None = Field(None, max_length=20)
    best_before: int | None = None


class PantryItemUpdate(BaseModel):
    """Update a pantry item."""

    name: str | None = Field(None, min_length=1, max_length=255)
    category: str | None = None
    barcode: str | None = None
    quantity: float | None = None
    unit: str | None = None
    best_before: int | None = None


class PantryItemResponse(BaseModel):
    """Pantry item response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    normalized_name: str | None
    category: str | None
    barcode: str | None
    quantity: float | None
    unit: str | None
    best_before: int | None
    added_at: int
    updated_at: int
