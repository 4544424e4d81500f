"""Configuration settings for MealGenie."""

import os
import secrets
from dataclasses import dataclass, field
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Built once per process and handed to the services that need it.
    """

    # Database
    DATABASE_URL: str = field(default_factory=lambda: _env("DATABASE_URL", "sqlite:///./mealgenie.db"))

    # JWT
    JWT_SECRET_KEY: str = field(default_factory=lambda: _env("JWT_SECRET_KEY", ""))
    JWT_ALGORITHM: str = field(default_factory=lambda: _env("JWT_ALGORITHM", "HS256"))
    JWT_EXPIRE_MINUTES: int = field(default_factory=lambda: int(_env("JWT_EXPIRE_MINUTES", "10080")))

    # Passwords
    PASSWORD_HASH_ROUNDS: int = field(default_factory=lambda: int(_env("PASSWORD_HASH_ROUNDS", "10")))
    RESET_TOKEN_EXPIRE_MINUTES: int = field(default_factory=lambda: int(_env("RESET_TOKEN_EXPIRE_MINUTES", "15")))
    RESET_HIDE_UNKNOWN_EMAIL: bool = field(default_factory=lambda: _env_flag("RESET_HIDE_UNKNOWN_EMAIL"))
    FRONTEND_BASE_URL: str = field(
        default_factory=lambda: _env("FRONTEND_BASE_URL", "http://localhost:5500/mealgenie/frontend")
    )

    # Email (SendGrid)
    SENDGRID_API_KEY: str = field(default_factory=lambda: _env("SENDGRID_API_KEY", ""))
    EMAIL_FROM_ADDRESS: str = field(default_factory=lambda: _env("EMAIL_FROM_ADDRESS", ""))
    EMAIL_FROM_NAME: str = field(default_factory=lambda: _env("EMAIL_FROM_NAME", "MealGenie Support"))

    # Application
    CORS_ORIGINS: tuple[str, ...] = field(
        default_factory=lambda: tuple(o.strip() for o in _env("CORS_ORIGINS", "*").split(",") if o.strip())
    )
    APP_ENV: str = field(default_factory=lambda: _env("APP_ENV", "development"))
    DEBUG: bool = field(default_factory=lambda: _env_flag("DEBUG"))

    # True when no key was configured and a per-process one was generated
    JWT_SECRET_GENERATED: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        if not self.JWT_SECRET_KEY:
            object.__setattr__(self, "JWT_SECRET_KEY", secrets.token_urlsafe(32))
            object.__setattr__(self, "JWT_SECRET_GENERATED", True)

    def validate(self) -> list[str]:
        """Validate settings and return list of warnings."""
        warnings = []
        if self.JWT_SECRET_GENERATED:
            warnings.append("JWT_SECRET_KEY is not set - using auto-generated key (not persistent across restarts)")
        if not self.SENDGRID_API_KEY or not self.EMAIL_FROM_ADDRESS:
            warnings.append("SENDGRID_API_KEY / EMAIL_FROM_ADDRESS not set - password reset emails will fail")
        if self.PASSWORD_HASH_ROUNDS < 10:
            warnings.append(f"PASSWORD_HASH_ROUNDS={self.PASSWORD_HASH_ROUNDS} is below the recommended minimum of 10")
        return warnings


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
