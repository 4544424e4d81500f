"""Pydantic schemas for nutrition endpoints."""

import datetime

from pydantic import BaseModel, Field


class NutritionIntakeRequest(BaseModel):
    date: datetime.date
    calories: float = Field(default=0, ge=0)
    protein: float = Field(default=0, ge=0)
    fat: float = Field(default=0, ge=0)
    carbs: float = Field(default=0, ge=0)


class NutritionEntryResponse(BaseModel):
    date: str
    calories: float
    protein: float
    fat: float
    carbs: float

    model_config = {"from_attributes": True}
