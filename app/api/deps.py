from fastapi import Depends, Request
from typing import Any, Dict

from ..core.security import verify_token, AuthenticationError, AuthorizationError, TokenError

def extract_bearer_token(authorization: str) -> str:
    """Second space-separated part of the header; the scheme itself is not checked."""
    parts = authorization.split(" ")
    return parts[1] if len(parts) > 1 else ""

async def get_current_claims(request: Request) -> Dict[str, Any]:
    """Verify the bearer token and attach its claims to ``request.state.decoded``."""
    authorization = request.headers.get("Authorization")
    if not authorization:
        raise AuthenticationError()

    token = extract_bearer_token(authorization)
    try:
        claims = verify_token(token)
    except TokenError:
        raise AuthenticationError()

    request.state.decoded = claims
    return claims

async def require_self_scope(
    email: str,
    claims: Dict[str, Any] = Depends(get_current_claims)
) -> Dict[str, Any]:
    """Only let a caller look up the address carried in their own token."""
    if claims.get("email") != email:
        raise AuthorizationError()
    return claims
