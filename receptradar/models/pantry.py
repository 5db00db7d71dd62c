"""Pantry item model for tracking what the user has at home."""

from sqlalchemy import Column, Float, Integer, Text

from receptradar.database import Base
from receptradar.models.mixins import epoch_now


class PantryItem(Base):
    """Pantry item entered manually or from a barcode lookup."""

    __tablename__ = "pantry_items"

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False)  # Display name
    normalized_name = Column(Text, nullable=True)  # Null for rows predating version 2
    category = Column(Text, nullable=True)
    barcode = Column(Text, nullable=True)
    quantity = Column(Float, nullable=True)
    unit = Column(Text, nullable=True)
    best_before = Column(Integer, nullable=True)  # Unix seconds
    added_at = Column(Integer, nullable=False, default=epoch_now)
    updated_at = Column(Integer, nullable=False, default=epoch_now, onupdate=epoch_now)
