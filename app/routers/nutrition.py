"""Nutrition log API endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import CurrentUser, get_current_user
from app.schemas.nutrition import NutritionEntryResponse, NutritionIntakeRequest
from app.services.nutrition import get_nutrition_service

router = APIRouter(prefix="/nutrition", tags=["Nutrition"])


@router.get("/data", response_model=list[NutritionEntryResponse])
def get_nutrition_data(
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[NutritionEntryResponse]:
    """Daily totals for the current user, oldest first."""
    entries = get_nutrition_service().get_entries(db, user.user_id)
    return [NutritionEntryResponse.model_validate(e) for e in entries]


@router.post("/data", response_model=NutritionEntryResponse)
def log_nutrition(
    body: NutritionIntakeRequest,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> NutritionEntryResponse:
    """Add an intake to the day's totals."""
    values = body.model_dump(exclude={"date"})
    entry = get_nutrition_service().add_intake(db, user.user_id, body.date.isoformat(), values)
    return NutritionEntryResponse.model_validate(entry)
