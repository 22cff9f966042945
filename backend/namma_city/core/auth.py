"""
Authentication dependencies for Namma City Backend
Resolves the caller's session token to a Seller and provides seller context
"""
from typing import Optional

from fastapi import Depends, Header
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from namma_city.core.exceptions import AuthError
from namma_city.core.state import PlatformState, get_platform_state
from namma_city.domain.seller import Seller


# Security scheme for bearer tokens; the x-auth-token header takes precedence
security = HTTPBearer(auto_error=False)


def extract_token(
    x_auth_token: Optional[str] = Header(None, alias="x-auth-token"),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> Optional[str]:
    """Session token from x-auth-token, or from Authorization: Bearer"""
    if x_auth_token:
        return x_auth_token
    if credentials:
        return credentials.credentials
    return None


async def get_current_seller(
    token: Optional[str] = Depends(extract_token),
    state: PlatformState = Depends(get_platform_state)
) -> Seller:
    """
    Dependency that resolves the calling seller from the session token.

    Usage:
        @router.get("/protected")
        async def protected_route(seller: Seller = Depends(get_current_seller)):
            return {"message": f"Hello {seller.name}"}
    """
    seller = state.sellers.resolve(token)
    if seller is None:
        raise AuthError("Missing or invalid authentication token")
    return seller

