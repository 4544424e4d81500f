"""Pydantic schemas for saved recipe endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field


class SavedRecipeCreate(BaseModel):
    title: str = Field(min_length=1, max_length=256)
    recipe: str = Field(min_length=1)
    image_url: str | None = Field(default=None, max_length=1024)


class SavedRecipeResponse(BaseModel):
    id: int
    title: str
    recipe: str
    image_url: str | None
    created_at: datetime

    model_config = {"from_attributes": True}
