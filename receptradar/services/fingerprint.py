"""Deterministic cache keys for ingredient sets."""

from collections.abc import Iterable

from receptradar.services.normalize import normalize_name

KEY_SEPARATOR = "|"

# Key for an empty ingredient set. Never used for cache hits.
EMPTY_KEY = ""


def build_ingredient_cache_key(ingredient_names: Iterable[str]) -> str:
    """Build the cache key for an unordered set of ingredient names.

    Names are normalized, de-duplicated and sorted by code point, so any
    permutation of the same set produces the same key. The separator cannot
    appear inside a normalized name.
    """
    names = {normalize_name(name).strip().lower() for name in ingredient_names}
    names.discard("")
    return KEY_SEPARATOR.join(sorted(names))
