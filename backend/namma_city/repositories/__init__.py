"""
Repository Layer - Data Access

In-memory stores that return domain models. Each store guards its
mutations with its own lock.

Author: Namma City
Date: 2025-10-17
"""
from namma_city.repositories.product_repository import ProductRepository
from namma_city.repositories.seller_repository import SellerRepository

__all__ = [
    'ProductRepository',
    'SellerRepository',
]
