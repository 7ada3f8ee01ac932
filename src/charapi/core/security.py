"""Security utilities for authentication."""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt
from pydantic import BaseModel, ValidationError as PayloadValidationError


ACCESS_TOKEN = "access"
REFRESH_TOKEN = "refresh"

# bcrypt only looks at the first 72 bytes; bcrypt>=5 refuses anything longer
MAX_PASSWORD_BYTES = 72


class TokenPayload(BaseModel):
    """JWT token payload."""
    sub: str  # User ID
    email: Optional[str] = None
    role: Optional[str] = None
    type: str  # "access" or "refresh"
    jti: str
    exp: int  # Expiration timestamp
    iat: int  # Issued at timestamp


def check_password_length(password: str) -> str:
    """Raise ValueError if the password does not fit in a bcrypt hash."""
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
    return password


def hash_password(password: str) -> str:
    """Hash password using bcrypt."""
    check_password_length(password)
    salt = bcrypt.gensalt(rounds=10)
    hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
    return hashed.decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash."""
    try:
        return bcrypt.checkpw(
            plain_password.encode('utf-8'),
            hashed_password.encode('utf-8')
        )
    except ValueError:
        # Malformed hash
        return False


def create_jwt_token(
    claims: dict,
    secret: str,
    expires_in: timedelta,
    token_type: str = ACCESS_TOKEN,
    algorithm: str = "HS256",
) -> str:
    """
    Create a signed JWT.

    Args:
        claims: Extra claims to embed (must include "sub")
        secret: Shared signing secret
        expires_in: Lifetime of the token
        token_type: "access" or "refresh"
        algorithm: JWT signing algorithm

    Returns:
        Encoded JWT token
    """
    now = datetime.now(timezone.utc)
    payload = {
        **claims,
        "type": token_type,
        "jti": uuid.uuid4().hex,
        "iat": int(now.timestamp()),
        "exp": int((now + expires_in).timestamp()),
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_jwt_token(token: str, secret: str, algorithm: str = "HS256") -> TokenPayload:
    """
    Decode and verify JWT token.

    Raises:
        jwt.ExpiredSignatureError: Token expired
        jwt.InvalidTokenError: Token invalid
    """
    payload = jwt.decode(token, secret, algorithms=[algorithm])
    return TokenPayload(**payload)


def verify_jwt_token(
    token: str,
    secret: str,
    expected_type: str = ACCESS_TOKEN,
    algorithm: str = "HS256",
) -> Optional[TokenPayload]:
    """
    Verify JWT token and return payload if valid.

    Returns:
        TokenPayload if valid, None if invalid, expired or of another type
    """
    try:
        payload = decode_jwt_token(token, secret, algorithm)
    except (jwt.InvalidTokenError, PayloadValidationError):
        return None
    if payload.type != expected_type:
        return None
    return payload
