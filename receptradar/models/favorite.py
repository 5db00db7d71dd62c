"""Favorite recipe model."""

from sqlalchemy import Column, Integer, Text, UniqueConstraint

from receptradar.database import Base
from receptradar.models.mixins import epoch_now


class Favorite(Base):
    """A favorited web or generated recipe.

    Identity is the (provider, recipe_id) pair. For generated recipes
    recipe_id holds the generated_recipes id as text.
    """

    __tablename__ = "favorites"
    __table_args__ = (
        UniqueConstraint("provider", "recipe_id", name="uq_favorites_provider_recipe"),
    )

    id = Column(Integer, primary_key=True)
    provider = Column(Text, nullable=False, default="web", server_default="web")
    recipe_id = Column(Text, nullable=False)
    recipe_data = Column(Text, nullable=True)  # JSON snapshot: title, image, sourceUrl
    added_at = Column(Integer, nullable=False, default=epoch_now)
