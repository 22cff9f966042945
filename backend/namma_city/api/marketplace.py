"""
Marketplace API Endpoints
Public, cross-seller product listings

- GET /api/marketplace - products with seller name and attached delivery partner fee
- GET /api/all-products - products with every logistics provider as a delivery option

Author: Namma City
Date: 2025-10-17
"""
from fastapi import APIRouter, Depends

from namma_city.core.state import PlatformState, get_platform_state

router = APIRouter()


@router.get("/marketplace")
async def get_marketplace(state: PlatformState = Depends(get_platform_state)):
    """
    Every product across sellers, for the public marketplace

    deliveryPartnerName and deliveryFeeINR are null for products without
    a delivery partner.
    """
    listings = state.marketplace.marketplace_listing()
    return {"products": [listing.to_dict() for listing in listings]}


@router.get("/all-products")
async def get_all_products(state: PlatformState = Depends(get_platform_state)):
    """Every product across sellers with flat-fee delivery options"""
    entries = state.marketplace.catalog_with_delivery_options()
    return {"products": [entry.to_dict() for entry in entries]}
