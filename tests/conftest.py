"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.models.nutrition import NutritionEntry  # noqa: F401
from app.models.pantry import GroceryItem, PantryItem  # noqa: F401
from app.models.recipe import SavedRecipe  # noqa: F401
from app.models.user import User  # noqa: F401
from app.services.auth import AuthService


class FakeEmailService:
    """Records reset emails instead of calling SendGrid."""

    def __init__(self) -> None:
        self.sent: list[dict] = []
        self.error: Exception | None = None

    def send_password_reset(self, to_email: str, name: str, token: str) -> None:
        if self.error:
            raise self.error
        self.sent.append({"to": to_email, "name": name, "token": token})

    @property
    def last_token(self) -> str:
        return self.sent[-1]["token"]


@pytest.fixture(name="db_session")
def db_session_fixture():
    """Create an in-memory SQLite database for tests."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    testing_session_local = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = testing_session_local()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(name="client")
def client_fixture(db_session: Session):
    """Create a test client with overridden DB dependency and disabled rate limiting."""
    from app.rate_limit import limiter
    from main import app

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    limiter.enabled = False
    with TestClient(app) as c:
        yield c
    limiter.enabled = True
    app.dependency_overrides.clear()


@pytest.fixture(name="outbox")
def outbox_fixture(monkeypatch: pytest.MonkeyPatch) -> FakeEmailService:
    """Swap the email service used by the forgot-password route."""
    fake = FakeEmailService()
    monkeypatch.setattr("app.routers.auth.get_email_service", lambda: fake)
    return fake


@pytest.fixture(name="test_user")
def test_user_fixture(db_session: Session):
    """Create a test user and return its data with a session token."""
    from app.services.jwt import get_jwt_service

    auth_service = AuthService()
    result = auth_service.register(db_session, "Test User", "test@example.com", "password123")
    token = get_jwt_service().create_token(result.user_id)

    return {
        "user_id": result.user_id,
        "email": result.email,
        "name": result.name,
        "token": token,
        "headers": {"Authorization": f"Bearer {token}"},
    }
