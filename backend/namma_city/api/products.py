"""
Products API Endpoints
Seller-scoped product catalog management

Every endpoint requires a session token; a seller only ever sees and
changes their own products.

Author: Namma City
Date: 2025-10-17
"""
from typing import Optional

from fastapi import APIRouter, Depends, status

from namma_city.core.auth import get_current_seller
from namma_city.core.state import PlatformState, get_platform_state
from namma_city.domain.product import ProductCreate, ProductUpdate
from namma_city.domain.seller import Seller

router = APIRouter()


@router.get("")
async def get_products(
    seller: Seller = Depends(get_current_seller),
    state: PlatformState = Depends(get_platform_state)
):
    """Products owned by the calling seller, in creation order"""
    products = state.marketplace.seller_listing(seller.id)
    return {"products": [product.to_dict() for product in products]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_product(
    body: ProductCreate,
    seller: Seller = Depends(get_current_seller),
    state: PlatformState = Depends(get_platform_state)
):
    """
    Create a product for the calling seller

    name, price and inventory are required. deliveryPartnerId, when given,
    must be one of the ids from /api/delivery-providers.
    """
    product = state.products.create(seller.id, body.model_dump())
    return {"message": "Product created successfully", "product": product.to_dict()}


@router.put("/{product_id}")
async def update_product(
    product_id: str,
    body: Optional[ProductUpdate] = None,
    seller: Seller = Depends(get_current_seller),
    state: PlatformState = Depends(get_platform_state)
):
    """
    Update fields of one of the calling seller's products

    Fields left out of the body keep their values; deliveryPartnerId: null
    detaches the delivery partner. An empty body changes nothing.
    """
    changes = body.model_dump(exclude_unset=True) if body is not None else {}
    product = state.products.update(seller.id, product_id, changes)
    return {"message": "Product updated successfully", "product": product.to_dict()}


@router.delete("/{product_id}")
async def delete_product(
    product_id: str,
    seller: Seller = Depends(get_current_seller),
    state: PlatformState = Depends(get_platform_state)
):
    """Delete one of the calling seller's products"""
    state.products.delete(seller.id, product_id)
    return {"message": "Product deleted successfully"}
