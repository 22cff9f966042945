"""
Domain Layer - Business Entities

Pydantic models for sellers and products, plus the static logistics
provider registry and platform pricing constants.

Author: Namma City
Date: 2025-10-17
"""
from namma_city.domain.product import Product
from namma_city.domain.seller import Seller
from namma_city.domain.logistics import LogisticsProvider, LogisticsRegistry

__all__ = ['Product', 'Seller', 'LogisticsProvider', 'LogisticsRegistry']
