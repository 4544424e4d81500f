"""Pydantic schemas for authentication and profile endpoints."""

from datetime import datetime

from pydantic import BaseModel

# Missing fields default to empty strings so the service reports them as a 400.


class LoginRequest(BaseModel):
    email: str = ""
    password: str = ""


class RegisterRequest(BaseModel):
    name: str = ""
    email: str = ""
    password: str = ""


class AuthResponse(BaseModel):
    message: str
    token: str
    name: str
    email: str


class MessageResponse(BaseModel):
    message: str


class ForgotPasswordRequest(BaseModel):
    email: str = ""


class ResetPasswordRequest(BaseModel):
    password: str = ""


class ProfileResponse(BaseModel):
    id: int
    name: str
    email: str
    created_at: datetime

    model_config = {"from_attributes": True}


class ProfileUpdateRequest(BaseModel):
    name: str | None = None
    email: str | None = None
