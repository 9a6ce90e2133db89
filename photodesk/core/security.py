"""Account and portal password hashing, portal link tokens and JWT bearer tokens."""

import secrets
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from photodesk.core.config import get_settings

USERNAME_MIN_LEN = 3
USERNAME_MAX_LEN = 64
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128

# bcrypt only reads the first 72 bytes of its input.
BCRYPT_MAX_BYTES = 72

PORTAL_TOKEN_BYTES = 9


def _bcrypt_input(plain: str) -> bytes:
    return plain.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    salt = bcrypt.gensalt(rounds=get_settings().BCRYPT_ROUNDS)
    return bcrypt.hashpw(_bcrypt_input(plain_password), salt).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Compare against a stored bcrypt hash; a malformed hash never matches."""
    try:
        return bcrypt.checkpw(_bcrypt_input(plain_password), hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def hash_portal_password(password: str | None) -> str | None:
    """Hash a client portal password; None or empty means the portal stays open."""
    if not password:
        return None
    return hash_password(password)


def new_portal_token() -> str:
    """Opaque, URL-safe random suffix for client portal links."""
    return secrets.token_urlsafe(PORTAL_TOKEN_BYTES)


def create_access_token(sub: str | int, role: str) -> str:
    """Create a JWT access token with sub (user id), role, and exp."""
    settings = get_settings()
    now = datetime.now(UTC)
    payload: dict[str, Any] = {
        "sub": str(sub),
        "role": role,
        "exp": now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES),
        "iat": now,
    }
    return jwt.encode(
        payload,
        settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (sub, role, exp, iat).
    Raises jwt.PyJWTError on invalid or expired token.
    """
    settings = get_settings()
    return jwt.decode(
        token,
        settings.JWT_SECRET.get_secret_value(),
        algorithms=[settings.JWT_ALGORITHM],
    )


def token_user_id(payload: dict[str, Any]) -> int | None:
    """User id carried in a decoded token's sub claim, or None if it is not an integer."""
    try:
        return int(payload.get("sub"))
    except (TypeError, ValueError):
        return None
