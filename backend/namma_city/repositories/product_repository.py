"""
Product Repository - Catalog Store

Holds products in memory and enforces per-seller ownership on every
mutation. Returns Product domain models, not raw dictionaries.

Author: Namma City
Date: 2025-10-17
"""
import logging
import math
import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from namma_city.core.exceptions import NotFoundError, ValidationError
from namma_city.domain.logistics import LogisticsRegistry
from namma_city.domain.product import Product

logger = logging.getLogger(__name__)

_LABELS = {
    'price': 'Price',
    'inventory': 'Inventory',
}


def coerce_number(field: str, value: Any, integral: bool = False):
    """
    Normalize a numeric field given as a number or numeric string

    Args:
        field: Field name, used in error messages
        value: Raw input value
        integral: Require a whole number and return an int

    Raises:
        ValidationError: value is missing, not numeric, negative or
            (when integral) fractional
    """
    label = _LABELS.get(field, field)

    # bool is an int subclass; true/false is not a price
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{label} must be a number")

    if isinstance(value, str):
        value = value.strip()
        # Whole-number strings stay exact, like int input
        try:
            value = int(value)
        except ValueError:
            pass

    if isinstance(value, int):
        if value < 0:
            raise ValidationError(f"{label} must be non-negative")
        if integral:
            return value

    if not isinstance(value, (str, int, float)):
        raise ValidationError(f"{label} must be a number")
    try:
        number = float(value)
    except ValueError:
        raise ValidationError(f"{label} must be a number")
    except OverflowError:
        raise ValidationError(f"{label} is too large")

    if not math.isfinite(number):
        raise ValidationError(f"{label} must be a number")
    if number < 0:
        raise ValidationError(f"{label} must be non-negative")

    if integral:
        if not number.is_integer():
            raise ValidationError(f"{label} must be a whole number")
        return int(number)
    return number


class ProductRepository:
    """
    In-memory store of Product records

    Every mutating method takes the caller's seller id. A product owned by
    another seller is reported exactly like a missing one (NotFoundError).
    """

    def __init__(self, logistics: LogisticsRegistry):
        self._logistics = logistics
        self._products: Dict[str, Product] = {}
        self._lock = threading.RLock()

    def _check_delivery_partner(self, partner_id: Optional[str]) -> Optional[str]:
        """Normalize an empty partner id to None and reject unknown ids"""
        if not partner_id:
            return None
        if not self._logistics.exists(partner_id):
            raise ValidationError("Invalid deliveryPartnerId")
        return partner_id

    @staticmethod
    def _build(data: dict) -> Product:
        try:
            return Product(**data)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid product data: {e.errors()[0]['msg']}")

    def _find_owned(self, seller_id: str, product_id: str) -> Product:
        product = self._products.get(product_id)
        if product is None or product.seller_id != seller_id:
            raise NotFoundError("Product not found")
        return product

    def create(self, seller_id: str, fields: dict) -> Product:
        """
        Create a product owned by seller_id

        Args:
            seller_id: Resolved id of the calling seller
            fields: name, price and inventory (required); description,
                image_url and delivery_partner_id (optional)

        Returns:
            The stored Product

        Raises:
            ValidationError: missing/invalid fields or unknown delivery partner
        """
        name = fields.get('name')
        if not name or fields.get('price') is None or fields.get('inventory') is None:
            raise ValidationError("Name, price and inventory are required")

        price = coerce_number('price', fields['price'])
        inventory = coerce_number('inventory', fields['inventory'], integral=True)
        partner_id = self._check_delivery_partner(fields.get('delivery_partner_id'))

        product = self._build({
            'id': str(uuid.uuid4()),
            'seller_id': seller_id,
            'name': name,
            'description': fields.get('description') or '',
            'price': price,
            'inventory': inventory,
            'image_url': fields.get('image_url') or '',
            'delivery_partner_id': partner_id,
            'created_at': datetime.now(timezone.utc),
        })

        with self._lock:
            self._products[product.id] = product

        logger.info(f"Seller {seller_id} created product {product.id} ({product.name})")
        return product

    def list_for_seller(self, seller_id: str) -> List[Product]:
        """Products owned by seller_id, in insertion order"""
        with self._lock:
            return [p for p in self._products.values() if p.seller_id == seller_id]

    def update(self, seller_id: str, product_id: str, changes: dict) -> Product:
        """
        Apply a partial update to a product owned by seller_id

        Only keys present in changes are applied. The whole patch is
        validated first, so a rejected update changes nothing.

        Raises:
            NotFoundError: no such product owned by seller_id
            ValidationError: invalid field value or unknown delivery partner
        """
        with self._lock:
            current = self._find_owned(seller_id, product_id)
            data = current.model_dump()

            if 'name' in changes:
                if not changes['name']:
                    raise ValidationError("Name cannot be empty")
                data['name'] = changes['name']
            if 'description' in changes:
                data['description'] = changes['description'] or ''
            if 'price' in changes:
                data['price'] = coerce_number('price', changes['price'])
            if 'inventory' in changes:
                data['inventory'] = coerce_number('inventory', changes['inventory'], integral=True)
            if 'image_url' in changes:
                data['image_url'] = changes['image_url'] or ''
            if 'delivery_partner_id' in changes:
                data['delivery_partner_id'] = self._check_delivery_partner(changes['delivery_partner_id'])

            updated = self._build(data)
            self._products[product_id] = updated

        logger.info(f"Seller {seller_id} updated product {product_id} ({', '.join(sorted(changes)) or 'no fields'})")
        return updated

    def delete(self, seller_id: str, product_id: str) -> None:
        """
        Delete a product owned by seller_id

        Raises:
            NotFoundError: no such product owned by seller_id
        """
        with self._lock:
            self._find_owned(seller_id, product_id)
            del self._products[product_id]

        logger.info(f"Seller {seller_id} deleted product {product_id}")

    def find_by_id(self, product_id: str) -> Optional[Product]:
        """Unscoped lookup, for read-only internal use"""
        return self._products.get(product_id)

    def find_all(self) -> List[Product]:
        """All products across sellers, in insertion order"""
        with self._lock:
            return list(self._products.values())

    def count(self) -> int:
        return len(self._products)

    def get_stats(self) -> dict:
        """Catalog statistics"""
        products = self.find_all()
        return {
            "total_products": len(products),
            "with_delivery_partner": sum(1 for p in products if p.delivery_partner_id),
            "out_of_stock": sum(1 for p in products if p.is_out_of_stock),
        }

    def clear(self):
        with self._lock:
            self._products.clear()
