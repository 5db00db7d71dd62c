"""Storage and retention for generated recipe batches."""

import json
import logging
from collections.abc import Iterable
from typing import Any

from sqlalchemy.orm import Session

from receptradar.models.generated_recipe import GeneratedRecipe
from receptradar.schemas.generated_recipe import (
    GeneratedIngredient,
    GeneratedRecipeCreate,
    GeneratedRecipeResponse,
    GeneratedStep,
)
from receptradar.services.fingerprint import EMPTY_KEY, build_ingredient_cache_key

logger = logging.getLogger(__name__)


def _load_json_list(raw: str | None, recipe_id: int | None, field: str) -> list[Any]:
    """Parse a stored JSON array, degrading to [] on corrupt payloads."""
    try:
        data = json.loads(raw or "[]")
    except (TypeError, ValueError) as e:
        logger.warning(f"Generated recipe {recipe_id}: unreadable {field}: {e}")
        return []
    if not isinstance(data, list):
        logger.warning(f"Generated recipe {recipe_id}: {field} is not a list")
        return []
    return data


def parse_ingredients(raw: str | None, recipe_id: int | None = None) -> list[GeneratedIngredient]:
    ingredients = []
    for item in _load_json_list(raw, recipe_id, "ingredients"):
        if not isinstance(item, dict):
            continue
        name = item.get("name")
        amount = item.get("amount")
        unit = item.get("unit")
        ingredients.append(
            GeneratedIngredient(
                name=name if isinstance(name, str) else str(name if name is not None else ""),
                amount=amount if isinstance(amount, int | float | str) else None,
                unit=unit if isinstance(unit, str) else None,
            )
        )
    return ingredients


def parse_steps(raw: str | None, recipe_id: int | None = None) -> list[GeneratedStep]:
    steps = []
    for item in _load_json_list(raw, recipe_id, "steps"):
        if not isinstance(item, dict):
            continue
        step_number = item.get("step_number")
        instruction = item.get("instruction")
        steps.append(
            GeneratedStep(
                step_number=step_number if isinstance(step_number, int) else None,
                instruction=(
                    instruction
                    if isinstance(instruction, str)
                    else str(instruction if instruction is not None else "")
                ),
            )
        )
    return steps


def to_response(row: GeneratedRecipe) -> GeneratedRecipeResponse:
    """Convert a stored row to its structured form."""
    return GeneratedRecipeResponse(
        id=row.id,
        ingredient_cache_key=row.ingredient_cache_key,
        title=row.title,
        ingredients=parse_ingredients(row.ingredients_json, row.id),
        steps=parse_steps(row.steps_json, row.id),
        servings=row.servings,
        ready_in_minutes=row.ready_in_minutes,
        image_path=row.image_path,
        created_at=row.created_at,
    )


class GeneratedRecipeService:
    """Read, write and retire generated recipes keyed by ingredient fingerprint."""

    def __init__(self, db: Session):
        self.db = db

    def _batch_query(self, ingredient_cache_key: str):
        return (
            self.db.query(GeneratedRecipe)
            .filter(GeneratedRecipe.ingredient_cache_key == ingredient_cache_key)
            .order_by(GeneratedRecipe.created_at.desc(), GeneratedRecipe.id.desc())
        )

    def get_batch_by_key(self, ingredient_cache_key: str) -> list[GeneratedRecipeResponse]:
        """All recipes sharing a cache key, newest first."""
        if ingredient_cache_key == EMPTY_KEY:
            return []
        return [to_response(row) for row in self._batch_query(ingredient_cache_key).all()]

    def get_batch(self, ingredient_names: Iterable[str]) -> list[GeneratedRecipeResponse]:
        """All recipes generated for this ingredient set, newest first."""
        return self.get_batch_by_key(build_ingredient_cache_key(ingredient_names))

    def get_by_ingredient_key_latest(
        self, ingredient_cache_key: str
    ) -> GeneratedRecipeResponse | None:
        """Most recent recipe for a cache key."""
        if ingredient_cache_key == EMPTY_KEY:
            return None
        row = self._batch_query(ingredient_cache_key).first()
        return to_response(row) if row else None

    def get_by_id(self, recipe_id: int) -> GeneratedRecipeResponse | None:
        row = self.db.get(GeneratedRecipe, recipe_id)
        return to_response(row) if row else None

    def save(self, recipe: GeneratedRecipeCreate) -> int:
        """Insert a generated recipe and return its id."""
        row = GeneratedRecipe(
            ingredient_cache_key=recipe.ingredient_cache_key,
            title=recipe.title,
            ingredients_json=json.dumps(
                [i.model_dump(exclude_none=True) for i in recipe.ingredients], ensure_ascii=False
            ),
            steps_json=json.dumps(
                [s.model_dump(exclude_none=True) for s in recipe.steps], ensure_ascii=False
            ),
            servings=recipe.servings,
            ready_in_minutes=recipe.ready_in_minutes,
            image_path=recipe.image_path,
        )
        self.db.add(row)
        self.db.commit()
        return row.id

    def delete_by_id(self, recipe_id: int) -> None:
        self.db.query(GeneratedRecipe).filter(GeneratedRecipe.id == recipe_id).delete(
            synchronize_session=False
        )
        self.db.commit()

    def delete_batch(self, ingredient_names: Iterable[str]) -> int:
        """Delete every recipe for this ingredient set."""
        return self.replace_batch_keeping_favorited(ingredient_names, [])

    def replace_batch_keeping_favorited(
        self,
        ingredient_names: Iterable[str],
        keep_ids: Iterable[int],
    ) -> int:
        """Clear a batch ahead of regeneration, sparing the ids in keep_ids.

        Favorited generated recipes must stay resolvable by id after their
        siblings are replaced. Returns the number of deleted rows.
        """
        key = build_ingredient_cache_key(ingredient_names)
        keep = sorted(set(keep_ids))

        query = self.db.query(GeneratedRecipe).filter(
            GeneratedRecipe.ingredient_cache_key == key
        )
        if keep:
            query = query.filter(GeneratedRecipe.id.not_in(keep))

        try:
            deleted = query.delete(synchronize_session=False)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info(f"Replaced batch '{key}': deleted {deleted}, kept {len(keep)}")
        return deleted
