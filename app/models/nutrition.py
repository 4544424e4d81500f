"""Nutrition log model."""

from sqlalchemy import Column, Float, ForeignKey, Integer, String, UniqueConstraint

from app.database import Base


class NutritionEntry(Base):
    """Daily nutrition totals for a user."""

    __tablename__ = "nutrition_entry"
    __table_args__ = (UniqueConstraint("user_id", "date", name="uq_nutrition_entry_user_date"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    date = Column(String(10), nullable=False)  # YYYY-MM-DD
    calories = Column(Float, nullable=False, default=0)
    protein = Column(Float, nullable=False, default=0)
    fat = Column(Float, nullable=False, default=0)
    carbs = Column(Float, nullable=False, default=0)
