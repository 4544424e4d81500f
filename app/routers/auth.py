"""Authentication API endpoints."""

import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.config import get_settings
from app.database import get_db
from app.errors import ErrorKind, error_response
from app.rate_limit import limiter
from app.schemas.auth import (
    AuthResponse,
    ForgotPasswordRequest,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    ResetPasswordRequest,
)
from app.services.auth import get_auth_service
from app.services.email_service import EmailDeliveryError, get_email_service
from app.services.jwt import get_jwt_service
from app.services.reset_tokens import get_reset_token_manager

logger = logging.getLogger("mealgenie")

router = APIRouter(tags=["Authentication"])

RESET_REQUESTED = "If an account exists with that email, a reset link has been sent."


@router.post("/register", response_model=AuthResponse, status_code=201)
@limiter.limit("5/minute")
def register(request: Request, body: RegisterRequest, db: Session = Depends(get_db)) -> AuthResponse:
    """Register a new user account."""
    auth_service = get_auth_service()
    result = auth_service.register(db, body.name, body.email, body.password)

    if not result.success:
        raise error_response(result.error_kind, result.error)

    token = get_jwt_service().create_token(result.user_id)  # type: ignore[arg-type]
    logger.info("Registered user %s", result.user_id)
    return AuthResponse(message="Registration successful", token=token, name=result.name, email=result.email)  # type: ignore[arg-type]


@router.post("/login", response_model=AuthResponse)
@limiter.limit("10/minute")
def login(request: Request, body: LoginRequest, db: Session = Depends(get_db)) -> AuthResponse:
    """Authenticate and receive a JWT token."""
    auth_service = get_auth_service()
    result = auth_service.authenticate(db, body.email, body.password)

    if not result.success:
        raise error_response(result.error_kind, result.error)

    token = get_jwt_service().create_token(result.user_id)  # type: ignore[arg-type]
    return AuthResponse(message="Login successful", token=token, name=result.name, email=result.email)  # type: ignore[arg-type]


@router.post("/forgot-password", response_model=MessageResponse)
@limiter.limit("3/minute")
def forgot_password(request: Request, body: ForgotPasswordRequest, db: Session = Depends(get_db)) -> MessageResponse:
    """Issue a reset token and email the reset link."""
    result = get_reset_token_manager().request(db, body.email)

    if not result.success:
        if result.error_kind == ErrorKind.NOT_FOUND and get_settings().RESET_HIDE_UNKNOWN_EMAIL:
            return MessageResponse(message=RESET_REQUESTED)
        raise error_response(result.error_kind, result.error)

    try:
        get_email_service().send_password_reset(result.email, result.name, result.token)  # type: ignore[arg-type]
    except EmailDeliveryError:
        logger.error("Reset email for user %s was not delivered", result.user_id)
        raise error_response(ErrorKind.UPSTREAM, "Email failed") from None

    if get_settings().RESET_HIDE_UNKNOWN_EMAIL:
        return MessageResponse(message=RESET_REQUESTED)
    return MessageResponse(message="Reset email sent!")


@router.put("/reset-password/{token}", response_model=MessageResponse)
@limiter.limit("5/minute")
def reset_password(
    request: Request, token: str, body: ResetPasswordRequest, db: Session = Depends(get_db)
) -> MessageResponse:
    """Set a new password using a valid reset token."""
    result = get_reset_token_manager().consume(db, token, body.password)

    if not result.success:
        raise error_response(result.error_kind, result.error)

    return MessageResponse(message="Password reset successful!")
