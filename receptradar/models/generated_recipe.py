"""Generated recipe model."""

from sqlalchemy import Column, Integer, Text

from receptradar.database import Base
from receptradar.models.mixins import epoch_now


class GeneratedRecipe(Base):
    """One recipe from a generation batch.

    All recipes of a batch share ingredient_cache_key. Rows are never
    updated after insert.
    """

    __tablename__ = "generated_recipes"

    id = Column(Integer, primary_key=True)
    ingredient_cache_key = Column(Text, nullable=False, index=True)
    title = Column(Text, nullable=False)
    ingredients_json = Column(Text, nullable=False)
    steps_json = Column(Text, nullable=False)
    servings = Column(Integer, nullable=True)
    ready_in_minutes = Column(Integer, nullable=True)
    image_path = Column(Text, nullable=True)  # Local file, first recipe of a batch only
    created_at = Column(Integer, nullable=False, default=epoch_now)
