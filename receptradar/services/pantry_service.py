"""Pantry service for pantry items and the ingredient list built from them."""

import logging
from collections.abc import Iterable

from sqlalchemy.orm import Session

from receptradar.models.pantry import PantryItem
from receptradar.schemas.pantry import PantryItemCreate, PantryItemUpdate
from receptradar.services.normalize import normalize_name

logger = logging.getLogger(__name__)

MAX_INGREDIENTS_FOR_RECIPES = 15


def build_ingredients_from_pantry(
    items: Iterable[PantryItem],
    limit: int = MAX_INGREDIENTS_FOR_RECIPES,
) -> list[str]:
    """Pick up to ``limit`` unique ingredient names, in pantry order."""
    seen = set()
    names = []
    for item in items:
        name = (item.normalized_name or item.name or "").strip().lower()
        if not name or name in seen:
            continue
        seen.add(name)
        names.append(name)
        if len(names) >= limit:
            break
    return names


class PantryService:
    """Service for pantry-related operations."""

    def __init__(self, db: Session):
        self.db = db

    def list_items(self) -> list[PantryItem]:
        """All pantry items, most recently touched first."""
        return (
            self.db.query(PantryItem)
            .order_by(PantryItem.updated_at.desc(), PantryItem.id.desc())
            .all()
        )

    def get_item(self, item_id: int) -> PantryItem | None:
        return self.db.get(PantryItem, item_id)

    def create_item(self, data: PantryItemCreate) -> PantryItem:
        item = PantryItem(
            name=data.name,
            normalized_name=normalize_name(data.name),
            category=data.category,
            barcode=data.barcode,
            quantity=data.quantity,
            unit=data.unit,
            best_before=data.best_before,
        )
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        logger.info(f"Added pantry item '{item.name}' -> '{item.normalized_name}'")
        return item

    def update_item(self, item_id: int, data: PantryItemUpdate) -> PantryItem | None:
        """Apply the fields that were set; the normalized name follows the name."""
        item = self.get_item(item_id)
        if not item:
            return None

        update_data = data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(item, field, value)
        if "name" in update_data:
            item.normalized_name = normalize_name(item.name)

        self.db.commit()
        self.db.refresh(item)
        return item

    def delete_item(self, item_id: int) -> bool:
        item = self.get_item(item_id)
        if not item:
            return False
        self.db.delete(item)
        self.db.commit()
        return True

    def ingredient_names(self, limit: int = MAX_INGREDIENTS_FOR_RECIPES) -> list[str]:
        """Ingredient names used to generate and look up recipes."""
        return build_ingredients_from_pantry(self.list_items(), limit=limit)
