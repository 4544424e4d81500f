"""Pydantic schemas for pantry and grocery endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator


def reject_null(value):
    # Omit a field to leave it unchanged; null would clear a required column.
    if value is None:
        raise ValueError("may be omitted but not null")
    return value


class PantryItemCreate(BaseModel):
    name: str = Field(min_length=1, max_length=256)
    quantity: str | None = Field(default=None, max_length=64)
    expires_at: str | None = Field(default=None, max_length=32)


class PantryItemUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=256)
    quantity: str | None = Field(default=None, max_length=64)
    expires_at: str | None = Field(default=None, max_length=32)

    @field_validator("name")
    @classmethod
    def name_not_null(cls, value: str | None) -> str | None:
        return reject_null(value)


class PantryItemResponse(BaseModel):
    id: int
    name: str
    quantity: str | None
    expires_at: str | None
    created_at: datetime

    model_config = {"from_attributes": True}


class GroceryItemCreate(BaseModel):
    name: str = Field(min_length=1, max_length=256)
    quantity: str | None = Field(default=None, max_length=64)


class GroceryItemUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=256)
    quantity: str | None = Field(default=None, max_length=64)
    bought: bool | None = None

    @field_validator("name", "bought")
    @classmethod
    def required_not_null(cls, value):
        return reject_null(value)


class GroceryItemResponse(BaseModel):
    id: int
    name: str
    quantity: str | None
    bought: bool
    created_at: datetime

    model_config = {"from_attributes": True}
