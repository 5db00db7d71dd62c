"""Saved web recipe model."""

from sqlalchemy import Column, Integer, Text

from receptradar.database import Base
from receptradar.models.mixins import epoch_now


class SavedWebRecipe(Base):
    """An external recipe page bookmarked by the user."""

    __tablename__ = "saved_web_recipes"

    id = Column(Integer, primary_key=True)
    title = Column(Text, nullable=True)
    source_url = Column(Text, nullable=False)
    image_url = Column(Text, nullable=True)
    ingredient_query = Column(Text, nullable=True)  # Pantry query the page was found with
    saved_at = Column(Integer, nullable=False, default=epoch_now)
