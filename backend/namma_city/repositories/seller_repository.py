"""
Seller Repository - Identity Store

Holds registered sellers in memory and handles registration, credential
checks and token resolution. The session token is the seller id.

Author: Namma City
Date: 2025-10-17
"""
import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional

from namma_city.core.exceptions import AuthError, ConflictError, ValidationError
from namma_city.domain.seller import Seller

logger = logging.getLogger(__name__)


class SellerRepository:
    """
    In-memory store of Seller records

    Registration order is preserved. Email uniqueness is checked and the
    seller inserted under one lock, so two concurrent registrations with
    the same email cannot both succeed.
    """

    def __init__(self, default_plan: str = "monthly"):
        self._default_plan = default_plan
        self._sellers: Dict[str, Seller] = {}
        self._ids_by_email: Dict[str, str] = {}
        self._lock = threading.RLock()

    def register(
        self,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str],
        subscription_plan: Optional[str] = None
    ) -> str:
        """
        Register a new seller

        Args:
            name: Display name
            email: Unique email (case-sensitive)
            password: Credential secret
            subscription_plan: Plan tag, defaults to the configured plan

        Returns:
            The new seller id

        Raises:
            ValidationError: name, email or password missing/empty
            ConflictError: a seller with this email already exists
        """
        if not name or not email or not password:
            raise ValidationError("Name, email and password are required")

        with self._lock:
            if email in self._ids_by_email:
                logger.info(f"Registration rejected, email already in use: {email}")
                raise ConflictError("Seller with this email already exists")

            seller = Seller(
                id=str(uuid.uuid4()),
                name=name,
                email=email,
                password=password,
                subscription_plan=subscription_plan or self._default_plan,
                created_at=datetime.now(timezone.utc),
            )
            self._sellers[seller.id] = seller
            self._ids_by_email[email] = seller.id

        logger.info(f"Registered seller {seller.id} ({seller.subscription_plan} plan)")
        return seller.id

    def authenticate(self, email: Optional[str], password: Optional[str]) -> str:
        """
        Check credentials and issue a session token

        Raises:
            AuthError: no seller matches both email and password exactly
        """
        seller = self.find_by_email(email) if email else None
        if seller is None or seller.password != password:
            logger.warning("Login failed: invalid credentials")
            raise AuthError("Invalid credentials")

        logger.debug(f"Seller {seller.id} logged in")
        return seller.id

    def resolve(self, token: Optional[str]) -> Optional[Seller]:
        """Seller for a session token, or None if the token is missing/unknown"""
        if not token:
            return None
        return self._sellers.get(token)

    def find_by_email(self, email: str) -> Optional[Seller]:
        seller_id = self._ids_by_email.get(email)
        return self._sellers.get(seller_id) if seller_id else None

    def find_all(self) -> List[Seller]:
        with self._lock:
            return list(self._sellers.values())

    def count(self) -> int:
        return len(self._sellers)

    def clear(self):
        with self._lock:
            self._sellers.clear()
            self._ids_by_email.clear()
