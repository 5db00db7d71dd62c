"""TTL key/value caches for product and recipe lookups.

Expiry is evaluated when an entry is read. Stale rows stay in the table until
they are overwritten or purged.
"""

import json
import logging
from typing import Any

from sqlalchemy.orm import Session

from receptradar.models.cache import ProductCacheEntry, RecipeCacheEntry
from receptradar.models.mixins import epoch_now

logger = logging.getLogger(__name__)

PRODUCT_TTL_SECONDS = 7 * 24 * 3600
RECIPE_TTL_SECONDS = 24 * 3600


class CacheService:
    """Cache over one of the TTL tables."""

    def __init__(
        self,
        db: Session,
        model: type[ProductCacheEntry] | type[RecipeCacheEntry],
        default_ttl_seconds: int,
    ):
        self.db = db
        self.model = model
        self.default_ttl_seconds = default_ttl_seconds

    def get(self, key: str, now: int | None = None) -> str | None:
        """Return the cached value, or None when missing or expired."""
        entry = self.db.get(self.model, key)
        if entry is None or not entry.is_valid(now):
            return None
        return entry.value

    def set(
        self,
        key: str,
        value: str,
        ttl_seconds: int | None = None,
        now: int | None = None,
    ) -> None:
        entry = self.db.get(self.model, key)
        if entry is None:
            entry = self.model(key=key)
            self.db.add(entry)
        entry.value = value
        entry.cached_at = epoch_now() if now is None else now
        entry.ttl_seconds = self.default_ttl_seconds if ttl_seconds is None else ttl_seconds
        self.db.commit()

    def get_json(self, key: str, now: int | None = None) -> Any | None:
        """Return the decoded cached value; a corrupt entry reads as a miss."""
        value = self.get(key, now)
        if value is None:
            return None
        try:
            return json.loads(value)
        except ValueError as e:
            logger.warning(f"Corrupt {self.model.__tablename__} entry '{key}': {e}")
            return None

    def set_json(self, key: str, value: Any, ttl_seconds: int | None = None) -> None:
        self.set(key, json.dumps(value, ensure_ascii=False), ttl_seconds)

    def delete(self, key: str) -> None:
        self.db.query(self.model).filter(self.model.key == key).delete()
        self.db.commit()

    def purge_expired(self, now: int | None = None) -> int:
        """Physically delete expired rows. Returns how many were removed."""
        if now is None:
            now = epoch_now()
        deleted = (
            self.db.query(self.model)
            .filter(self.model.cached_at + self.model.ttl_seconds <= now)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        if deleted:
            logger.info(f"Purged {deleted} expired rows from {self.model.__tablename__}")
        return deleted


def get_product_cache(db: Session) -> CacheService:
    return CacheService(db, ProductCacheEntry, PRODUCT_TTL_SECONDS)


def get_recipe_cache(db: Session) -> CacheService:
    return CacheService(db, RecipeCacheEntry, RECIPE_TTL_SECONDS)


def purge_expired_caches(db: Session, now: int | None = None) -> int:
    """Drop expired rows from both caches. Returns how many were removed."""
    return get_product_cache(db).purge_expired(now) + get_recipe_cache(db).purge_expired(now)
