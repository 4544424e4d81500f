"""Error kinds shared by the core services and their mapping to HTTP status codes."""

from enum import Enum

from fastapi import HTTPException


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    AUTH = "auth"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INVALID_OR_EXPIRED = "invalid_or_expired"
    UPSTREAM = "upstream"


STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.AUTH: 401,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 400,
    ErrorKind.INVALID_OR_EXPIRED: 400,
    ErrorKind.UPSTREAM: 500,
}


def error_response(kind: ErrorKind | None, message: str | None) -> HTTPException:
    """Build the HTTPException for a failed service result."""
    status_code = STATUS_CODES.get(kind, 500) if kind else 500
    return HTTPException(status_code=status_code, detail=message or "Server error")
