"""Saved recipe model."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from app.database import Base, utcnow


class SavedRecipe(Base):
    """Recipe the user kept for later."""

    __tablename__ = "saved_recipe"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    title = Column(String(256), nullable=False)
    recipe = Column(Text, nullable=False)
    image_url = Column(String(1024), nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
