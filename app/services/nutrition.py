"""Daily nutrition log."""

from sqlalchemy.orm import Session

from app.models.nutrition import NutritionEntry

NUTRIENTS = ("calories", "protein", "fat", "carbs")


class NutritionService:
    """Keeps one running total per user and day."""

    def get_entries(self, db: Session, user_id: int) -> list[NutritionEntry]:
        """Get all daily totals for a user, oldest day first."""
        return db.query(NutritionEntry).filter(NutritionEntry.user_id == user_id).order_by(NutritionEntry.date).all()

    def add_intake(self, db: Session, user_id: int, date: str, values: dict[str, float]) -> NutritionEntry:
        """Add values to the day's totals, creating the day if needed."""
        entry = db.query(NutritionEntry).filter(NutritionEntry.user_id == user_id, NutritionEntry.date == date).first()
        if entry is None:
            entry = NutritionEntry(user_id=user_id, date=date, calories=0, protein=0, fat=0, carbs=0)
            db.add(entry)

        for nutrient in NUTRIENTS:
            setattr(entry, nutrient, (getattr(entry, nutrient) or 0) + values.get(nutrient, 0))

        db.commit()
        db.refresh(entry)
        return entry


_nutrition_service: NutritionService | None = None


def get_nutrition_service() -> NutritionService:
    """Get singleton nutrition service instance."""
    global _nutrition_service
    if _nutrition_service is None:
        _nutrition_service = NutritionService()
    return _nutrition_service
