"""Tests for AuthService store-failure handling."""

from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError

from app.errors import ErrorKind
from app.models.user import User
from app.services.auth import AuthService


def store_down() -> OperationalError:
    return OperationalError("SELECT 1", {}, Exception("database is locked"))


class TestStoreFailures:
    def test_login_store_failure_is_upstream(self):
        db = MagicMock()
        db.query.side_effect = store_down()

        result = AuthService().authenticate(db, "test@example.com", "password123")

        assert not result.success
        assert result.error_kind == ErrorKind.UPSTREAM
        assert result.error == "Server error"
        db.rollback.assert_called_once()

    def test_profile_update_store_failure_is_upstream(self):
        db = MagicMock()
        db.commit.side_effect = store_down()
        user = User(id=1, name="Test User", email="test@example.com", password_hash="x")

        result = AuthService().update_profile(db, user, name="Renamed")

        assert result.error_kind == ErrorKind.UPSTREAM
        db.rollback.assert_called_once()

    def test_profile_lookup_failure_is_upstream(self):
        db = MagicMock()
        db.query.side_effect = store_down()
        user = User(id=1, name="Test User", email="test@example.com", password_hash="x")

        result = AuthService().update_profile(db, user, email="new@example.com")

        assert result.error_kind == ErrorKind.UPSTREAM
        db.commit.assert_not_called()
