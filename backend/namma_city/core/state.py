"""
Platform state - owns the in-memory stores for the process lifetime

Built once at startup by the FastAPI lifespan and cleared on shutdown.
Routers reach the stores through the get_platform_state dependency below.
"""
import logging
from typing import Optional

from fastapi import Request

from namma_city.core.config import Settings, settings as default_settings
from namma_city.domain.logistics import LogisticsRegistry
from namma_city.repositories.product_repository import ProductRepository
from namma_city.repositories.seller_repository import SellerRepository
from namma_city.services.marketplace_service import MarketplaceService

logger = logging.getLogger(__name__)


class PlatformState:
    """Logistics registry, identity store, catalog store and aggregation service"""

    def __init__(self, config: Optional[Settings] = None):
        config = config or default_settings
        self.logistics = LogisticsRegistry()
        self.sellers = SellerRepository(default_plan=config.DEFAULT_SUBSCRIPTION_PLAN)
        self.products = ProductRepository(self.logistics)
        self.marketplace = MarketplaceService(
            self.sellers,
            self.products,
            self.logistics,
            flat_delivery_fee_inr=config.FLAT_DELIVERY_FEE_INR,
        )
        logger.info(f"Platform state initialized with {len(self.logistics)} logistics providers")

    def close(self):
        """Drop all sellers and products; nothing is persisted"""
        logger.info(
            f"Discarding {self.sellers.count()} sellers and {self.products.count()} products"
        )
        self.products.clear()
        self.sellers.clear()


def get_platform_state(request: Request) -> PlatformState:
    """FastAPI dependency: the PlatformState attached to the running app"""
    return request.app.state.platform
