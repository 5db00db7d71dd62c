"""Enums for model fields."""

from enum import Enum


class FavoriteProvider(str, Enum):
    """Where a favorited recipe comes from."""

    WEB = "web"
    GENERATED = "generated"

    @classmethod
    def coerce(cls, value: str | None) -> "FavoriteProvider":
        """Map unknown provider values to web, as the store does."""
        try:
            return cls(value)
        except ValueError:
            return cls.WEB
