"""Saved recipe storage."""

from sqlalchemy.orm import Session

from app.models.recipe import SavedRecipe


class RecipeService:
    """Handles the user's saved recipes."""

    def list_recipes(self, db: Session, user_id: int) -> list[SavedRecipe]:
        """Get all saved recipes for a user, newest first."""
        return (
            db.query(SavedRecipe)
            .filter(SavedRecipe.user_id == user_id)
            .order_by(SavedRecipe.created_at.desc(), SavedRecipe.id.desc())
            .all()
        )

    def get_recipe(self, db: Session, recipe_id: int, user_id: int) -> SavedRecipe | None:
        """Get a single saved recipe by ID, scoped to user."""
        return db.query(SavedRecipe).filter(SavedRecipe.id == recipe_id, SavedRecipe.user_id == user_id).first()

    def save_recipe(self, db: Session, user_id: int, title: str, recipe: str, image_url: str | None) -> SavedRecipe:
        saved = SavedRecipe(user_id=user_id, title=title.strip(), recipe=recipe, image_url=image_url or None)
        db.add(saved)
        db.commit()
        db.refresh(saved)
        return saved

    def delete_recipe(self, db: Session, saved: SavedRecipe) -> None:
        db.delete(saved)
        db.commit()


_recipe_service: RecipeService | None = None


def get_recipe_service() -> RecipeService:
    """Get singleton recipe service instance."""
    global _recipe_service
    if _recipe_service is None:
        _recipe_service = RecipeService()
    return _recipe_service
