from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Union
from jose import ExpiredSignatureError, JWTError, jwt
from fastapi import HTTPException, status
from enum import Enum

from .config import settings

# Claims are caller-defined, so registered-claim validation is off apart from exp.
DECODE_OPTIONS = {
    "verify_signature": True,
    "verify_exp": True,
    "verify_aud": False,
    "verify_iat": False,
    "verify_nbf": False,
    "verify_iss": False,
    "verify_sub": False,
    "verify_jti": False,
    "verify_at_hash": False,
}

class Role(str, Enum):
    ADMIN = "admin"
    USER = "user"

    @classmethod
    def parse(cls, value: Any) -> "Role":
        """Map a stored role value to a Role; anything but "admin" is a plain user."""
        if value == cls.ADMIN.value:
            return cls.ADMIN
        return cls.USER

def is_admin(role: Union[Role, str, None]) -> bool:
    """Capability check for admin-only behavior."""
    return Role.parse(role) is Role.ADMIN

# Token errors
class TokenError(Exception):
    """Base class for bearer token failures."""

class InvalidTokenError(TokenError):
    """Signature mismatch or malformed token."""

class TokenExpiredError(TokenError):
    """Token was valid but its expiry has passed."""

# JWT utilities
def create_access_token(
    claims: Dict[str, Any],
    secret: Optional[str] = None,
    expires_delta: Optional[timedelta] = None
) -> str:
    """Create a signed JWT carrying ``claims`` and an ``exp`` timestamp."""
    to_encode = dict(claims)

    if expires_delta is None:
        expires_delta = timedelta(hours=settings.ACCESS_TOKEN_EXPIRE_HOURS)
    to_encode["exp"] = datetime.now(timezone.utc) + expires_delta

    return jwt.encode(
        to_encode,
        secret or settings.ACCESS_TOKEN_SECRET,
        algorithm=settings.ALGORITHM
    )

def verify_token(token: str, secret: Optional[str] = None) -> Dict[str, Any]:
    """Verify a JWT and return the claims it was issued with.

    Raises TokenExpiredError once the token is past its expiry and
    InvalidTokenError for anything else that fails verification.
    """
    if not token:
        raise InvalidTokenError("Token is missing")

    try:
        payload = jwt.decode(
            token,
            secret or settings.ACCESS_TOKEN_SECRET,
            algorithms=[settings.ALGORITHM],
            options=DECODE_OPTIONS
        )
    except ExpiredSignatureError as e:
        raise TokenExpiredError(str(e)) from e
    except JWTError as e:
        raise InvalidTokenError(str(e)) from e

    if not isinstance(payload, dict):
        raise InvalidTokenError("Token payload is not an object")

    payload.pop("exp", None)
    return payload

# Security exceptions
class AuthenticationError(HTTPException):
    def __init__(self, detail: str = "unauthorized access"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )

class AuthorizationError(HTTPException):
    def __init__(self, detail: str = "forbidden access"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
        )
