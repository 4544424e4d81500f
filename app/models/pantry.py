"""Pantry and grocery list models."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String

from app.database import Base, utcnow


class PantryItem(Base):
    """Ingredient the user has at home."""

    __tablename__ = "pantry_item"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    name = Column(String(256), nullable=False)
    quantity = Column(String(64), nullable=True)
    expires_at = Column(String(32), nullable=True)  # free-form date entered by the user
    created_at = Column(DateTime, nullable=False, default=utcnow)


class GroceryItem(Base):
    """Entry on the user's grocery list."""

    __tablename__ = "grocery_item"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    name = Column(String(256), nullable=False)
    quantity = Column(String(64), nullable=True)
    bought = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
