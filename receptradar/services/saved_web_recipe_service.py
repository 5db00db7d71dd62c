"""Saved web recipe service."""

from sqlalchemy.orm import Session

from receptradar.models.saved_web_recipe import SavedWebRecipe


class SavedWebRecipeService:
    """Bookmarks of external recipe pages."""

    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> list[SavedWebRecipe]:
        return (
            self.db.query(SavedWebRecipe)
            .order_by(SavedWebRecipe.saved_at.desc(), SavedWebRecipe.id.desc())
            .all()
        )

    def get_by_ingredient_query(self, ingredient_query: str) -> list[SavedWebRecipe]:
        return (
            self.db.query(SavedWebRecipe)
            .filter(SavedWebRecipe.ingredient_query == ingredient_query)
            .order_by(SavedWebRecipe.saved_at.desc(), SavedWebRecipe.id.desc())
            .all()
        )

    def save(
        self,
        source_url: str,
        title: str | None = None,
        image_url: str | None = None,
        ingredient_query: str | None = None,
    ) -> SavedWebRecipe:
        recipe = SavedWebRecipe(
            source_url=source_url,
            title=title,
            image_url=image_url,
            ingredient_query=ingredient_query,
        )
        self.db.add(recipe)
        self.db.commit()
        self.db.refresh(recipe)
        return recipe

    def delete(self, recipe_id: int) -> bool:
        deleted = self.db.query(SavedWebRecipe).filter(SavedWebRecipe.id == recipe_id).delete()
        self.db.commit()
        return deleted > 0
