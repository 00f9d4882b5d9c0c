"""
Security utilities for JWT session tokens and password hashing.

Session tokens are stateless HS256 JWTs carrying the user id in the `sub`
claim. Passwords are hashed using bcrypt.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID
from jose import JWTError, jwt
from passlib.context import CryptContext

from jobby.core.config import Settings
from jobby.core.exceptions import InvalidTokenError, ServerMisconfiguredError

# Password hashing context (bcrypt)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a hashed password."""
    # Bcrypt has a 72-byte limit - truncate if necessary
    password_bytes = plain_password.encode('utf-8')[:72]
    return pwd_context.verify(password_bytes, hashed_password)


def get_password_hash(password: str) -> str:
    """
    Hash a password using bcrypt.

    Note: Bcrypt has a 72-byte limit. Passwords longer than 72 bytes
    are automatically truncated to comply with this limitation.
    """
    # Bcrypt has a 72-byte limit - truncate if necessary
    password_bytes = password.encode('utf-8')[:72]
    return pwd_context.hash(password_bytes)


def create_access_token(
    data: dict,
    settings: Settings,
    expires_delta: Optional[timedelta] = None
) -> str:
    """
    Create a signed session token.

    Args:
        data: Claims to encode (typically {"sub": user_id, "username": ..., "email": ...})
        settings: Application settings holding the signing secret
        expires_delta: Optional lifetime (default: ACCESS_TOKEN_EXPIRE_DAYS)

    Returns:
        Encoded JWT token as a string

    Raises:
        ServerMisconfiguredError: If the signing secret is not set
    """
    if not settings.JWT_SECRET:
        raise ServerMisconfiguredError("JWT_SECRET is not set")

    to_encode = data.copy()

    if expires_delta is None:
        expires_delta = timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)
    expire = datetime.now(timezone.utc) + expires_delta

    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.ALGORITHM)


def create_user_token(user, settings: Settings) -> str:
    """Issue a session token for a stored user."""
    return create_access_token(
        data={"sub": str(user.id), "username": user.username, "email": user.email},
        settings=settings,
    )


def decode_token(token: str, settings: Settings) -> dict:
    """
    Decode and validate a JWT token.

    Raises:
        JWTError: If token is invalid or expired
    """
    return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.ALGORITHM])


def verify_token(token: Optional[str], settings: Settings) -> UUID:
    """
    Verify a session token and return the user id it was issued for.

    Raises:
        InvalidTokenError: If the token is empty, tampered with, expired,
            or does not identify a user
    """
    if not token:
        raise InvalidTokenError()

    try:
        payload = decode_token(token, settings)
        return UUID(payload["sub"])
    except (JWTError, KeyError, TypeError, ValueError):
        raise InvalidTokenError()
