"""User model."""

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String

from app.database import Base, utcnow


class User(Base):
    """Application user."""

    __tablename__ = "user"
    __table_args__ = (
        # Reset hash and expiry are set and cleared together.
        CheckConstraint(
            "(reset_token_hash IS NULL) = (reset_token_expires_at IS NULL)",
            name="ck_user_reset_token_pair",
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(256), nullable=False)
    email = Column(String(256), unique=True, nullable=False, index=True)
    password_hash = Column(String(256), nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    last_login_at = Column(DateTime, nullable=True)
    reset_token_hash = Column(String(64), nullable=True, index=True)  # sha256 hex
    reset_token_expires_at = Column(DateTime, nullable=True)
