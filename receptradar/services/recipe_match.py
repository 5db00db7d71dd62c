"""Pantry-to-recipe match scoring and ranking."""

import math
from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

from receptradar.models.pantry import PantryItem
from receptradar.schemas.recipe import ExtendedIngredient, RecipeMatch
from receptradar.services.normalize import normalize_name

T = TypeVar("T")


def pantry_normalized_names(items: Iterable[PantryItem]) -> set[str]:
    """Build the lookup set of normalized pantry names.

    Legacy rows without a stored normalized name are normalized on the fly.
    """
    names = set()
    for item in items:
        name = item.normalized_name or normalize_name(item.name or "")
        key = name.strip().lower()
        if key:
            names.add(key)
    return names


def score_recipe(
    ingredients: Sequence[ExtendedIngredient],
    pantry_names: set[str],
) -> RecipeMatch:
    """Count how many of a recipe's ingredients the pantry covers.

    Ingredients whose name normalizes to "" can never match but still count
    towards the total. Missing entries keep the display string, in order.
    """
    have = 0
    missing: list[str] = []

    for ingredient in ingredients:
        raw = (ingredient.name or ingredient.original or "").strip()
        key = normalize_name(raw).lower()
        if key and key in pantry_names:
            have += 1
        else:
            missing.append(ingredient.original or ingredient.name or raw or "?")

    return RecipeMatch(have=have, total=len(ingredients), missing=missing)


def rank_by_match(
    items: Iterable[T],
    match_of: Callable[[T], RecipeMatch],
    ready_in_minutes_of: Callable[[T], int | None],
) -> list[T]:
    """Order candidates by best pantry coverage, then quickest to make.

    Candidates without a cooking time sort after every timed one with the same
    ratio. The sort is stable, so full ties keep their input order.
    """

    def sort_key(item: T) -> tuple[float, float]:
        minutes = ready_in_minutes_of(item)
        return (-match_of(item).ratio, math.inf if minutes is None else minutes)

    return sorted(items, key=sort_key)
