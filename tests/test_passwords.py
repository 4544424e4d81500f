"""Tests for bcrypt password hashing."""

import pytest

from app.services.passwords import MAX_PASSWORD_BYTES, hash_password, verify_password


class TestHashPassword:
    def test_hash_is_salted(self):
        """Same password hashes differently each time."""
        first = hash_password("pw123", rounds=4)
        second = hash_password("pw123", rounds=4)
        assert first != second
        assert first.startswith("$2")

    def test_default_work_factor(self):
        """Default cost comes from settings (10)."""
        assert hash_password("pw123").split("$")[2] == "10"

    def test_rejects_overlong_password(self):
        with pytest.raises(ValueError):
            hash_password("x" * (MAX_PASSWORD_BYTES + 1), rounds=4)


class TestVerifyPassword:
    def test_matching_password(self):
        assert verify_password("pw123", hash_password("pw123", rounds=4)) is True

    def test_wrong_password(self):
        assert verify_password("nope", hash_password("pw123", rounds=4)) is False

    def test_malformed_hash_returns_false(self):
        """A corrupt stored hash is a mismatch, not an error."""
        assert verify_password("pw123", "not-a-bcrypt-hash") is False

    def test_empty_inputs(self):
        assert verify_password("", hash_password("pw123", rounds=4)) is False
        assert verify_password("pw123", "") is False
