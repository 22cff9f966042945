"""
Logistics API Endpoints
Lists delivery partners eligible for a city
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from namma_city.core.state import PlatformState, get_platform_state

router = APIRouter()


@router.get("/delivery-providers")
async def get_delivery_providers(
    city: Optional[str] = Query(None, description="City to check coverage for, e.g. Bangalore"),
    state: PlatformState = Depends(get_platform_state)
):
    """
    Logistics providers serving a city

    Pan-India providers are always listed. Without a city only the
    pan-India providers are returned.
    """
    providers = state.logistics.list_providers(city)
    return {"providers": [provider.to_dict() for provider in providers]}
