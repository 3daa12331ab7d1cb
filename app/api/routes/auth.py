from fastapi import APIRouter, Body, Depends
from typing import Any, Dict

from ...schemas.auth import TokenResponse
from ...services.auth_service import AuthService, ClaimsIssuer, get_claims_issuer

router = APIRouter(tags=["Authentication"])

@router.post("/jwt", response_model=TokenResponse)
async def issue_token(
    payload: Dict[str, Any] = Body(...),
    issuer: ClaimsIssuer = Depends(get_claims_issuer)
):
    """Issue a bearer token whose claims come from the request body."""
    return AuthService(issuer).create_token(payload)
