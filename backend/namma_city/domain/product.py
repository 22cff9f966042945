"""
Product Domain Model

Represents a catalog item owned by exactly one seller.
This is the single source of truth for product data structure.

Author: Namma City
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Any, Optional
from datetime import datetime


class Product(BaseModel):
    """
    Product domain model - represents a product in a seller's catalog

    Fields:
        id: Opaque product ID (uuid4)
        seller_id: ID of the owning seller
        name: Product name
        description: Product description (empty string when not given)
        price: Price in INR, non-negative
        inventory: Units in stock, non-negative
        image_url: Image reference (empty string when not given)
        delivery_partner_id: Logistics provider id, if one is attached
        created_at: When the product was created
    """

    # Primary identification
    id: str = Field(..., description="Product ID")
    seller_id: str = Field(..., description="Owning seller ID")
    name: str = Field(..., min_length=1, description="Product name")

    # Details
    description: str = Field("", description="Product description")
    image_url: str = Field("", description="Image reference")

    # Pricing and inventory
    price: float = Field(..., ge=0, description="Price in INR")
    inventory: int = Field(..., ge=0, description="Units in stock")

    # Logistics
    delivery_partner_id: Optional[str] = Field(None, description="Logistics provider ID")

    # Metadata
    created_at: datetime = Field(..., description="Creation timestamp")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    @property
    def is_out_of_stock(self) -> bool:
        """Check if product is out of stock"""
        return self.inventory <= 0

    def to_dict(self) -> dict:
        """JSON-ready dictionary with camelCase keys"""
        return self.model_dump(mode="json", by_alias=True)


class ProductCreate(BaseModel):
    """
    Schema for creating a new product

    Numeric fields are left loose here; the catalog store coerces and
    validates them so "45" and 45 are treated alike.
    """
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Any] = None
    inventory: Optional[Any] = None
    image_url: Optional[str] = None
    delivery_partner_id: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductUpdate(BaseModel):
    """
    Schema for updating an existing product

    Only fields present in the request are applied, so callers should use
    model_dump(exclude_unset=True). An explicit null deliveryPartnerId
    clears the partner.
    """
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Any] = None
    inventory: Optional[Any] = None
    image_url: Optional[str] = None
    delivery_partner_id: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
