"""Favorites service."""

import json
import logging

from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from receptradar.models.enums import FavoriteProvider
from receptradar.models.favorite import Favorite
from receptradar.schemas.favorite import FavoriteCreate, FavoriteRecipeData, FavoriteResponse

logger = logging.getLogger(__name__)


def parse_recipe_data(raw: str | None) -> FavoriteRecipeData | None:
    """Parse a stored snapshot; a corrupt one is treated as absent."""
    if not raw:
        return None
    try:
        return FavoriteRecipeData.model_validate(json.loads(raw))
    except (ValueError, ValidationError) as e:
        logger.warning(f"Ignoring unreadable favorite recipe_data: {e}")
        return None


def to_response(favorite: Favorite) -> FavoriteResponse:
    return FavoriteResponse(
        id=favorite.id,
        provider=FavoriteProvider.coerce(favorite.provider).value,
        recipe_id=favorite.recipe_id,
        recipe_data=parse_recipe_data(favorite.recipe_data),
        added_at=favorite.added_at,
    )


def _dump_recipe_data(data: FavoriteRecipeData | None) -> str | None:
    if data is None:
        return None
    return data.model_dump_json(by_alias=True, exclude_none=True)


class FavoritesService:
    """Service for favorited web and generated recipes."""

    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> list[Favorite]:
        return self.db.query(Favorite).order_by(Favorite.added_at.desc(), Favorite.id.desc()).all()

    def get_by_recipe(self, provider: str, recipe_id: str) -> Favorite | None:
        return (
            self.db.query(Favorite)
            .filter(Favorite.provider == provider, Favorite.recipe_id == recipe_id)
            .first()
        )

    def create(self, data: FavoriteCreate) -> Favorite:
        """Favorite a recipe.

        Raises IntegrityError if (provider, recipe_id) is already a favorite.
        """
        favorite = Favorite(
            provider=data.provider,
            recipe_id=data.recipe_id,
            recipe_data=_dump_recipe_data(data.recipe_data),
        )
        self.db.add(favorite)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        self.db.refresh(favorite)
        return favorite

    def update_recipe_data(
        self, provider: str, recipe_id: str, data: FavoriteRecipeData
    ) -> Favorite | None:
        """Replace the stored snapshot of a favorite."""
        favorite = self.get_by_recipe(provider, recipe_id)
        if not favorite:
            return None
        favorite.recipe_data = _dump_recipe_data(data)
        self.db.commit()
        self.db.refresh(favorite)
        return favorite

    def delete_by_recipe(self, provider: str, recipe_id: str) -> bool:
        deleted = (
            self.db.query(Favorite)
            .filter(Favorite.provider == provider, Favorite.recipe_id == recipe_id)
            .delete()
        )
        self.db.commit()
        return deleted > 0

    def favorited_generated_ids(self) -> set[int]:
        """Ids of generated recipes that are currently favorites."""
        rows = (
            self.db.query(Favorite.recipe_id)
            .filter(Favorite.provider == FavoriteProvider.GENERATED.value)
            .all()
        )
        ids = set()
        for (recipe_id,) in rows:
            try:
                ids.add(int(recipe_id))
            except ValueError:
                logger.warning(f"Generated favorite with non-numeric recipe_id '{recipe_id}'")
        return ids
