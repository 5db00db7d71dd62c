"""Product and ingredient name normalization.

Names come from manual entry, barcode lookups and generated recipes, e.g.
"Arla Mjölk 3% 1,5 l" or "2 dl grädde". Matching and cache keys compare the
canonical form: lower-cased, punctuation-free, with amount and unit noise
removed from both ends.
"""

import re
import unicodedata
from dataclasses import dataclass

UNIT_WORDS = {
    # Weight
    "g",
    "gr",
    "gram",
    "hg",
    "kg",
    "mg",
    "lb",
    "lbs",
    "oz",
    # Volume
    "l",
    "dl",
    "cl",
    "ml",
    "msk",
    "tsk",
    "krm",
    "cup",
    "cups",
    "tbsp",
    "tsp",
    # Count/pack
    "st",
    "stk",
    "pcs",
    "pkt",
    "förp",
    "burk",
    "x",
}

_PUNCTUATION = re.compile(r"[\W_]+")
_NUMBER = re.compile(r"\d+")
# "500g", "1l", "2x", "12st"
_NUMBER_WITH_UNIT = re.compile(r"\d+([a-zåäö]+)")


@dataclass(frozen=True)
class NormalizedName:
    normalized_name: str


def _is_noise(token: str) -> bool:
    if token in UNIT_WORDS or _NUMBER.fullmatch(token):
        return True
    glued = _NUMBER_WITH_UNIT.fullmatch(token)
    return bool(glued and glued.group(1) in UNIT_WORDS)


def normalize_product_name(raw: str) -> NormalizedName:
    """Canonicalize a free-text name for comparison.

    Idempotent: normalizing an already normalized name returns it unchanged.
    Returns an empty name when nothing but noise remains.
    """
    text = unicodedata.normalize("NFKC", raw or "").lower()
    tokens = _PUNCTUATION.sub(" ", text).split()

    start, end = 0, len(tokens)
    while start < end and _is_noise(tokens[start]):
        start += 1
    while end > start and _is_noise(tokens[end - 1]):
        end -= 1

    return NormalizedName(normalized_name=" ".join(tokens[start:end]))


def normalize_name(raw: str) -> str:
    """Shorthand returning just the normalized string."""
    return normalize_product_name(raw).normalized_name
