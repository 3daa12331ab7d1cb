from typing import Any, Dict
import logging

from ..core.security import create_access_token
from ..schemas.auth import TokenResponse

logger = logging.getLogger(__name__)

class ClaimsIssuer:
    """Decides what identity goes into a token for a given request body.

    A hardened issuer would check a password or other credential here and
    raise AuthenticationError when it does not match.
    """

    def issue_claims(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError

class PassThroughClaimsIssuer(ClaimsIssuer):
    """WEAK: whatever the caller sends becomes the token identity, unchecked."""

    def issue_claims(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return dict(payload)

def get_claims_issuer() -> ClaimsIssuer:
    """Claims issuer dependency."""
    return PassThroughClaimsIssuer()

class AuthService:
    def __init__(self, issuer: ClaimsIssuer):
        self.issuer = issuer

    def create_token(self, payload: Dict[str, Any]) -> TokenResponse:
        """Issue an access token for the claims the issuer derives from ``payload``."""
        claims = self.issuer.issue_claims(payload)
        token = create_access_token(claims)
        logger.info(f"Issued access token for {claims.get('email', '<no email>')}")
        return TokenResponse(token=token)
