"""Password hashing with bcrypt."""

import bcrypt

from app.config import get_settings

# bcrypt only looks at the first 72 bytes; longer inputs are rejected rather than truncated.
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int | None = None) -> str:
    """Hash a password using bcrypt.

    Raises ValueError if the password is longer than bcrypt can handle.
    """
    encoded = password.encode("utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    if rounds is None:
        rounds = get_settings().PASSWORD_HASH_ROUNDS
    return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against its hash. Never raises on mismatch or a malformed hash."""
    if not password or not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False
