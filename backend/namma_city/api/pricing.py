"""
Pricing API Endpoints
"""
from fastapi import APIRouter

from namma_city.domain.pricing import get_pricing

router = APIRouter()


@router.get("/pricing")
async def pricing():
    """Seller subscription fee and ONDC network fee"""
    return get_pricing()
