"""
Authentication API endpoints for Namma City
- Seller registration
- Login (issues the session token)
"""
from fastapi import APIRouter, Depends, status

from namma_city.core.state import PlatformState, get_platform_state
from namma_city.domain.seller import LoginRequest, SellerCreate


router = APIRouter()


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register_seller(
    body: SellerCreate,
    state: PlatformState = Depends(get_platform_state)
):
    """Register a new seller; subscriptionPlan defaults to monthly"""
    seller_id = state.sellers.register(
        name=body.name,
        email=body.email,
        password=body.password,
        subscription_plan=body.subscription_plan,
    )
    return {"message": "Seller registered successfully", "sellerId": seller_id}


@router.post("/login")
async def login(
    body: LoginRequest,
    state: PlatformState = Depends(get_platform_state)
):
    """
    Exchange email and password for a session token

    Send the token back in the x-auth-token header (or as a Bearer token)
    on product endpoints.
    """
    token = state.sellers.authenticate(body.email, body.password)
    return {"message": "Login successful", "token": token}
