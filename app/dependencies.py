"""Authentication dependencies for FastAPI routes."""

from dataclasses import dataclass

from fastapi import HTTPException, Request

from app.services.jwt import get_jwt_service

UNAUTHORIZED = "Not authorized"


@dataclass
class CurrentUser:
    """Authenticated user context."""

    user_id: int


def get_bearer_token(request: Request) -> str | None:
    """Token from an `Authorization: Bearer <token>` header, if present."""
    auth_header = request.headers.get("Authorization", "")
    scheme, _, token = auth_header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def get_current_user(request: Request) -> CurrentUser:
    """Validate the bearer token before the route runs. Raises 401 if missing or invalid."""
    token = get_bearer_token(request)
    if not token:
        raise HTTPException(status_code=401, detail=UNAUTHORIZED)

    user_id = get_jwt_service().verify_token(token)
    if user_id is None:
        raise HTTPException(status_code=401, detail=UNAUTHORIZED)

    request.state.user_id = user_id
    return CurrentUser(user_id=user_id)
