"""
Seller Domain Model

A registered tenant of the marketplace. Sellers are never mutated or
deleted once registered.

Author: Namma City
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime


class Seller(BaseModel):
    """Seller identity record"""

    id: str = Field(..., description="Seller ID, also used as the session token")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Unique email, matched exactly as stored")
    password: str = Field(..., exclude=True, description="Credential secret (never serialized)")
    subscription_plan: str = Field("monthly", description="Subscription plan tag")
    created_at: datetime = Field(..., description="Registration timestamp")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_dict(self) -> dict:
        """Public representation, without the credential"""
        return self.model_dump(mode="json", by_alias=True)


class SellerCreate(BaseModel):
    """Schema for POST /api/register"""
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    subscription_plan: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LoginRequest(BaseModel):
    """Schema for POST /api/login"""
    email: Optional[str] = None
    password: Optional[str] = None
