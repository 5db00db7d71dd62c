"""Mixins for SQLAlchemy models."""

import time

from sqlalchemy import Column, Integer, Text


def epoch_now() -> int:
    """Current time as whole Unix seconds, the store's timestamp format."""
    return int(time.time())


class CacheEntryMixin:
    """Mixin for key/value cache tables with a per-entry time-to-live."""

    key = Column(Text, primary_key=True)
    value = Column(Text, nullable=False)
    cached_at = Column(Integer, nullable=False, default=epoch_now)
    ttl_seconds = Column(Integer, nullable=False)

    @property
    def expires_at(self) -> int:
        return self.cached_at + self.ttl_seconds

    def is_valid(self, now: int | None = None) -> bool:
        """Check if the entry is still fresh at ``now``."""
        if now is None:
            now = epoch_now()
        return now < self.expires_at
