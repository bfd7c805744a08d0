"""
Password hashing and JWT helpers.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt

from todolist.models.user import TokenData


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with a fresh bcrypt salt."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False


def create_access_token(
    user_id: str,
    secret_key: str,
    algorithm: str,
    expires_delta: timedelta,
    now: Optional[datetime] = None,
) -> str:
    """Create a signed JWT for a user."""
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "iat": issued_at,
        "exp": issued_at + expires_delta,
    }
    return jwt.encode(payload, secret_key, algorithm=algorithm)


def decode_access_token(token: str, secret_key: str, algorithm: str) -> Optional[TokenData]:
    """
    Decode and verify a JWT.

    Returns None when the token is malformed, signed with another key,
    expired, or missing its claims.
    """
    try:
        payload = jwt.decode(
            token,
            secret_key,
            algorithms=[algorithm],
            options={"require": ["sub", "iat", "exp"]},
        )
    except jwt.PyJWTError:
        return None

    return TokenData(
        user_id=payload["sub"],
        issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
        expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
    )
