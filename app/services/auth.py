"""Authentication service."""

import logging
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.database import utcnow
from app.errors import ErrorKind
from app.models.user import User
from app.services.passwords import hash_password, verify_password

logger = logging.getLogger("mealgenie")


@dataclass
class AuthResult:
    """Result of an authentication attempt."""

    success: bool
    error: str | None = None
    error_kind: ErrorKind | None = None
    user_id: int | None = None
    email: str | None = None
    name: str | None = None


def _failure(kind: ErrorKind, error: str) -> AuthResult:
    return AuthResult(success=False, error=error, error_kind=kind)


def _success(user: User) -> AuthResult:
    return AuthResult(success=True, user_id=user.id, email=user.email, name=user.name)


class AuthService:
    """Handles user registration, authentication and profile updates."""

    def register(self, db: Session, name: str, email: str, password: str) -> AuthResult:
        """Register a new user. Returns AuthResult with success/error."""
        name = (name or "").strip()
        email = (email or "").strip()
        if not name or not email or not password:
            return _failure(ErrorKind.VALIDATION, "All fields are required")

        try:
            if db.query(User).filter(User.email == email).first():
                return _failure(ErrorKind.CONFLICT, "Email already registered")

            try:
                password_hash = hash_password(password)
            except ValueError as e:
                return _failure(ErrorKind.VALIDATION, str(e))

            user = User(name=name, email=email, password_hash=password_hash)
            db.add(user)
            db.commit()
            db.refresh(user)
        except IntegrityError:
            # Lost a race with a concurrent registration for the same email.
            db.rollback()
            return _failure(ErrorKind.CONFLICT, "Email already registered")
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Registration failed")
            return _failure(ErrorKind.UPSTREAM, "Server error")

        return _success(user)

    def authenticate(self, db: Session, email: str, password: str) -> AuthResult:
        """Authenticate a user by email and password."""
        email = (email or "").strip()
        if not email or not password:
            return _failure(ErrorKind.VALIDATION, "Email and password are required")

        try:
            user = db.query(User).filter(User.email == email).first()
            if not user:
                return _failure(ErrorKind.AUTH, "User not found")

            if not verify_password(password, user.password_hash):
                return _failure(ErrorKind.AUTH, "Invalid credentials")

            user.last_login_at = utcnow()
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Login failed")
            return _failure(ErrorKind.UPSTREAM, "Server error")

        return _success(user)

    def get_user(self, db: Session, user_id: int) -> User | None:
        """Get a user by ID."""
        return db.query(User).filter(User.id == user_id).first()

    def update_profile(self, db: Session, user: User, name: str | None = None, email: str | None = None) -> AuthResult:
        """Change display name and/or email."""
        if name is not None:
            name = name.strip()
            if not name:
                return _failure(ErrorKind.VALIDATION, "Name cannot be empty")
        if email is not None:
            email = email.strip()
            if not email:
                return _failure(ErrorKind.VALIDATION, "Email cannot be empty")

        try:
            if email is not None and email != user.email:
                if db.query(User).filter(User.email == email).first():
                    return _failure(ErrorKind.CONFLICT, "Email already registered")

            if name is not None:
                user.name = name
            if email is not None:
                user.email = email
            db.commit()
            db.refresh(user)
        except IntegrityError:
            db.rollback()
            return _failure(ErrorKind.CONFLICT, "Email already registered")
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Profile update failed")
            return _failure(ErrorKind.UPSTREAM, "Server error")

        return _success(user)


_auth_service: AuthService | None = None


def get_auth_service() -> AuthService:
    """Get singleton auth service instance."""
    global _auth_service
    if _auth_service is None:
        _auth_service = AuthService()
    return _auth_service
