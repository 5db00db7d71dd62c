"""Key/value settings model."""

from sqlalchemy import Column, Integer, Text

from receptradar.database import Base
from receptradar.models.mixins import epoch_now


class Setting(Base):
    __tablename__ = "settings"

    key = Column(Text, primary_key=True)
    value = Column(Text, nullable=True)
    updated_at = Column(Integer, nullable=False, default=epoch_now, onupdate=epoch_now)
