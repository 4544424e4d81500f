"""Profile endpoints for the signed-in user."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import CurrentUser, get_current_user
from app.errors import error_response
from app.schemas.auth import ProfileResponse, ProfileUpdateRequest
from app.services.auth import get_auth_service

router = APIRouter(prefix="/me", tags=["Profile"])


@router.get("", response_model=ProfileResponse)
def get_profile(
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> ProfileResponse:
    """Return the current user's profile."""
    record = get_auth_service().get_user(db, user.user_id)
    if not record:
        raise HTTPException(status_code=404, detail="User not found")
    return ProfileResponse.model_validate(record)


@router.put("", response_model=ProfileResponse)
def update_profile(
    body: ProfileUpdateRequest,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> ProfileResponse:
    """Update name and/or email."""
    auth_service = get_auth_service()
    record = auth_service.get_user(db, user.user_id)
    if not record:
        raise HTTPException(status_code=404, detail="User not found")

    result = auth_service.update_profile(db, record, name=body.name, email=body.email)
    if not result.success:
        raise error_response(result.error_kind, result.error)
    return ProfileResponse.model_validate(record)
