"""Pantry API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from receptradar.api.dependencies import get_pantry_service
from receptradar.schemas.pantry import PantryItemCreate, PantryItemResponse, PantryItemUpdate
from receptradar.services.pantry_service import PantryService

router = APIRouter(prefix="/api/v1/pantry", tags=["pantry"])


@router.get("", response_model=list[PantryItemResponse])
def list_pantry_items(service: Annotated[PantryService, Depends(get_pantry_service)]):
    """List pantry items, most recently updated first."""
    return service.list_items()


@router.post("", response_model=PantryItemResponse, status_code=status.HTTP_201_CREATED)
def create_pantry_item(
    item_data: PantryItemCreate,
    service: Annotated[PantryService, Depends(get_pantry_service)],
):
    """Add an item to the pantry."""
    return service.create_item(item_data)


@router.get("/{item_id}", response_model=PantryItemResponse)
def get_pantry_item(item_id: int, service: Annotated[PantryService, Depends(get_pantry_service)]):
    item = service.get_item(item_id)
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pantry item not found")
    return item


@router.put("/{item_id}", response_model=PantryItemResponse)
def update_pantry_item(
    item_id: int,
    item_data: PantryItemUpdate,
    service: Annotated[PantryService, Depends(get_pantry_service)],
):
    """Update a pantry item."""
    item = service.update_item(item_id, item_data)
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pantry item not found")
    return item


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_pantry_item(
    item_id: int,
    service: Annotated[PantryService, Depends(get_pantry_service)],
):
    """Remove an item from the pantry."""
    if not service.delete_item(item_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pantry item not found")
