"""TTL cache models."""

from receptradar.database import Base
from receptradar.models.mixins import CacheEntryMixin


class ProductCacheEntry(Base, CacheEntryMixin):
    """Cached barcode/product lookups."""

    __tablename__ = "product_cache"


class RecipeCacheEntry(Base, CacheEntryMixin):
    """Cached recipe search responses."""

    __tablename__ = "recipe_cache"
