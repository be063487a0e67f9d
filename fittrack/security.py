"""Password hashing and bearer token helpers.

Tokens are HS256 JWTs carrying the subject identifier, its role and an
expiry. The signing key always comes from the caller's settings.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from werkzeug.security import generate_password_hash, check_password_hash

from fittrack.config import Settings
from fittrack.schemas.user import TokenData

USER_ROLE = "user"
TRAINER_ROLE = "trainer"


class TokenError(Exception):
    """Raised when a bearer token cannot be trusted."""


class TokenExpired(TokenError):
    pass


def hash_password(password: str) -> str:
    return generate_password_hash(password)


def verify_password(password: str, hashed_password: str) -> bool:
    return check_password_hash(hashed_password, password)


def create_access_token(subject: str, role: str, settings: Settings,
                        expires_delta: Optional[timedelta] = None) -> str:
    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {
        "sub": subject,
        "role": role,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> TokenData:
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise TokenExpired("Token expired") from exc
    except jwt.InvalidTokenError as exc:
        raise TokenError("Invalid token") from exc

    role = payload.get("role")
    if role not in (USER_ROLE, TRAINER_ROLE):
        raise TokenError("Invalid token")
    return TokenData(subject=payload["sub"], role=role)
