"""Password hashing, JWT issuance/verification and the role check."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from app.core.config import settings
from app.core.errors import InvalidSignature, MalformedToken, TokenExpired
from app.core.roles import Role

# bcrypt only looks at the first 72 bytes of the password.
BCRYPT_MAX_BYTES = 72


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a verified access token."""

    user_id: int
    role: Role


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(
    user_id: int,
    role: Role,
    issued_at: datetime | None = None,
) -> str:
    """
    Create a signed JWT carrying sub (user id), role and iat.

    exp is only written when JWT_EXPIRE_MINUTES is configured.
    """
    now = issued_at or datetime.now(UTC)
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "role": Role(role).value,
        "iat": now,
    }
    if settings.JWT_EXPIRE_MINUTES is not None:
        payload["exp"] = now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    secret = settings.ACCESS_TOKEN_SECRET.get_secret_value()
    return jwt.encode(payload, secret, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> TokenClaims:
    """
    Verify the token signature (and exp when present) and return its claims.

    Raises InvalidSignature, TokenExpired or MalformedToken.
    """
    secret = settings.ACCESS_TOKEN_SECRET.get_secret_value()
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["sub", "role"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise TokenExpired() from e
    except jwt.InvalidSignatureError as e:
        raise InvalidSignature() from e
    except jwt.PyJWTError as e:
        raise MalformedToken(f"Malformed token: {e}") from e

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError) as e:
        raise MalformedToken("Token subject is not a user id") from e
    try:
        role = Role(payload["role"])
    except ValueError as e:
        raise MalformedToken("Token role is not recognised") from e
    return TokenClaims(user_id=user_id, role=role)


def authorize(required_role: Role, claims: TokenClaims) -> bool:
    """True only when the token role is exactly the required role (no hierarchy)."""
    return claims.role == required_role
