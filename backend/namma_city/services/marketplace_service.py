"""
Marketplace Service
Read-only views joining products, sellers and logistics providers

Purpose:
- Seller dashboard listing (a seller's own products)
- Public marketplace listing with seller name and delivery fee
- Full catalog with every provider as a delivery option (flat fee)

Nothing here mutates the stores. Dangling references fall back to
"Unknown" / None instead of raising.

Author: Namma City
Date: 2025-10-17
"""
import logging
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from namma_city.domain.logistics import LogisticsRegistry
from namma_city.domain.product import Product
from namma_city.repositories.product_repository import ProductRepository
from namma_city.repositories.seller_repository import SellerRepository

logger = logging.getLogger(__name__)

UNKNOWN_SELLER = "Unknown"


class MarketplaceListing(BaseModel):
    """One product as shown on the public marketplace"""
    id: str
    name: str
    description: str
    price_inr: float = Field(..., serialization_alias="priceINR")
    inventory: int
    image_url: str = Field(..., serialization_alias="imageUrl")
    seller_name: str = Field(..., serialization_alias="sellerName")
    delivery_partner_id: Optional[str] = Field(None, serialization_alias="deliveryPartnerId")
    delivery_partner_name: Optional[str] = Field(None, serialization_alias="deliveryPartnerName")
    delivery_fee_inr: Optional[float] = Field(None, serialization_alias="deliveryFeeINR")

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class DeliveryOption(BaseModel):
    id: str
    name: str
    delivery_fee_inr: float = Field(..., serialization_alias="deliveryFeeINR")


class CatalogEntry(BaseModel):
    """A product with all its fields, its seller name and delivery options"""
    product: Product
    seller_name: str
    delivery_options: List[DeliveryOption]

    def to_dict(self) -> dict:
        data = self.product.to_dict()
        data['sellerName'] = self.seller_name
        data['deliveryOptions'] = [
            option.model_dump(mode="json", by_alias=True) for option in self.delivery_options
        ]
        return data


class MarketplaceService:
    """
    Aggregation over the identity store, catalog store and logistics registry
    """

    def __init__(
        self,
        sellers: SellerRepository,
        products: ProductRepository,
        logistics: LogisticsRegistry,
        flat_delivery_fee_inr: float = 50
    ):
        self._sellers = sellers
        self._products = products
        self._logistics = logistics
        self._flat_delivery_fee_inr = flat_delivery_fee_inr

    def _seller_name(self, seller_id: str) -> str:
        seller = self._sellers.resolve(seller_id)
        if seller is None:
            logger.warning(f"Product references unknown seller {seller_id}")
            return UNKNOWN_SELLER
        return seller.name

    def seller_listing(self, seller_id: str) -> List[Product]:
        """A seller's own products, for the private dashboard"""
        return self._products.list_for_seller(seller_id)

    def marketplace_listing(self) -> List[MarketplaceListing]:
        """
        Every product in the catalog, enriched for the public marketplace

        The delivery partner name and fee come from the product's attached
        provider; both are None when no provider is attached (or the id no
        longer resolves).
        """
        listings = []
        for product in self._products.find_all():
            provider = self._logistics.get_provider(product.delivery_partner_id)
            listings.append(MarketplaceListing(
                id=product.id,
                name=product.name,
                description=product.description,
                price_inr=product.price,
                inventory=product.inventory,
                image_url=product.image_url,
                seller_name=self._seller_name(product.seller_id),
                delivery_partner_id=product.delivery_partner_id,
                delivery_partner_name=provider.name if provider else None,
                delivery_fee_inr=provider.base_fee_inr if provider else None,
            ))
        return listings

    def catalog_with_delivery_options(self) -> List[CatalogEntry]:
        """
        Every product with all registered providers as delivery options

        Each option carries the same flat fee; no distance or weight based
        pricing is done.
        """
        options = [
            DeliveryOption(id=p.id, name=p.name, delivery_fee_inr=self._flat_delivery_fee_inr)
            for p in self._logistics.get_all()
        ]
        return [
            CatalogEntry(
                product=product,
                seller_name=self._seller_name(product.seller_id),
                delivery_options=options,
            )
            for product in self._products.find_all()
        ]
