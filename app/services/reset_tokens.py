"""Password reset tokens: issue, store as a hash, validate and consume."""

import hashlib
import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import Settings, get_settings
from app.database import utcnow
from app.errors import ErrorKind
from app.models.user import User
from app.services.passwords import MAX_PASSWORD_BYTES, hash_password

logger = logging.getLogger("mealgenie")

INVALID_OR_EXPIRED = "Invalid or expired token"


@dataclass
class ResetResult:
    """Result of a reset request or consumption."""

    success: bool
    error: str | None = None
    error_kind: ErrorKind | None = None
    token: str | None = None
    user_id: int | None = None
    email: str | None = None
    name: str | None = None


def generate_reset_token() -> str:
    """32 random bytes as 64 hex characters."""
    return secrets.token_hex(32)


def hash_reset_token(token: str) -> str:
    """SHA-256 hex digest. No salt: the token is random and used once."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


class ResetTokenManager:
    """Issues single-use, time-limited password reset tokens.

    Only the hash and expiry are stored on the user. Issuing a new token
    overwrites both, so only the most recent token is ever valid.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or get_settings()
        self.expire_minutes = settings.RESET_TOKEN_EXPIRE_MINUTES

    def request(self, db: Session, email: str, now: datetime | None = None) -> ResetResult:
        """Issue a reset token for the user with this email.

        Returns the plaintext token for the reset link. It is not persisted.
        """
        email = (email or "").strip()
        if not email:
            return ResetResult(success=False, error="Email is required", error_kind=ErrorKind.VALIDATION)

        now = now or utcnow()
        try:
            user = db.query(User).filter(User.email == email).first()
            if not user:
                return ResetResult(success=False, error="User not found", error_kind=ErrorKind.NOT_FOUND)

            token = generate_reset_token()
            db.execute(
                update(User)
                .where(User.id == user.id)
                .values(
                    reset_token_hash=hash_reset_token(token),
                    reset_token_expires_at=now + timedelta(minutes=self.expire_minutes),
                )
            )
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Storing reset token failed")
            return ResetResult(success=False, error="Server error", error_kind=ErrorKind.UPSTREAM)

        return ResetResult(success=True, token=token, user_id=user.id, email=user.email, name=user.name)

    def consume(self, db: Session, token: str, new_password: str, now: datetime | None = None) -> ResetResult:
        """Set a new password if the token matches an unexpired reset request.

        Wrong, expired and already used tokens fail the same way. The password
        update and the clearing of the token happen in one conditional UPDATE,
        so a token can win at most once.
        """
        if not new_password:
            return ResetResult(success=False, error="Password is required", error_kind=ErrorKind.VALIDATION)
        if len(new_password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            # Checked before the token so the answer does not depend on whether it matched.
            error = f"Password must be at most {MAX_PASSWORD_BYTES} bytes"
            return ResetResult(success=False, error=error, error_kind=ErrorKind.VALIDATION)
        if not token:
            return ResetResult(success=False, error=INVALID_OR_EXPIRED, error_kind=ErrorKind.INVALID_OR_EXPIRED)

        now = now or utcnow()
        token_hash = hash_reset_token(token)
        matches = (User.reset_token_hash == token_hash, User.reset_token_expires_at > now)

        try:
            user = db.query(User).filter(*matches).first()
            if not user:
                return ResetResult(success=False, error=INVALID_OR_EXPIRED, error_kind=ErrorKind.INVALID_OR_EXPIRED)

            password_hash = hash_password(new_password)
            result = db.execute(
                update(User)
                .where(User.id == user.id, *matches)
                .values(password_hash=password_hash, reset_token_hash=None, reset_token_expires_at=None)
            )
            if result.rowcount != 1:
                # Consumed or replaced between the lookup and the update.
                db.rollback()
                return ResetResult(success=False, error=INVALID_OR_EXPIRED, error_kind=ErrorKind.INVALID_OR_EXPIRED)
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Password reset failed")
            return ResetResult(success=False, error="Server error", error_kind=ErrorKind.UPSTREAM)

        logger.info("Password reset completed for user %s", user.id)
        return ResetResult(success=True, user_id=user.id, email=user.email, name=user.name)


_reset_token_manager: ResetTokenManager | None = None


def get_reset_token_manager() -> ResetTokenManager:
    """Get singleton reset token manager instance."""
    global _reset_token_manager
    if _reset_token_manager is None:
        _reset_token_manager = ResetTokenManager()
    return _reset_token_manager
