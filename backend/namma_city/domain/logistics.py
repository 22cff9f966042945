"""
Logistics Provider Registry
Static list of ONDC shipping partners a seller can attach to a product

Providers are immutable for the lifetime of the process. A provider whose
city list is ["All"] serves every city.

Author: Namma City
Date: 2025-10-17
"""
from dataclasses import dataclass, asdict
from typing import Dict, List, Optional, Tuple


ALL_CITIES = "All"


@dataclass(frozen=True)
class LogisticsProvider:
    """Shipping partner with city coverage and a flat base fee"""
    id: str
    name: str
    description: str
    cities: Tuple[str, ...]
    base_fee_inr: float

    @property
    def serves_all_cities(self) -> bool:
        return ALL_CITIES in self.cities

    def serves(self, city: str) -> bool:
        """Case-insensitive match against the listed cities"""
        wanted = city.lower()
        return any(c.lower() == wanted for c in self.cities)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        data = asdict(self)
        data['cities'] = list(self.cities)
        data['baseFeeINR'] = data.pop('base_fee_inr')
        return data


# ================================================================================
# PROVIDER REGISTRY
# ================================================================================

LOGISTICS_PROVIDERS: Dict[str, LogisticsProvider] = {
    "loadshare": LogisticsProvider(
        id="loadshare",
        name="Loadshare",
        description=(
            "First logistics network participant on ONDC; offers hyperlocal, standard, "
            "same-day (SDD) and next-day (NDD) services for F&B and groceries"
        ),
        cities=(
            "Bangalore", "Bhubaneswar", "Chandigarh", "Dehradun", "Delhi",
            "Guwahati", "Hyderabad", "Jaipur", "Kolkata", "Lucknow",
            "Mumbai", "Patna", "Pune", "Siliguri", "Trivandrum",
        ),
        base_fee_inr=30,
    ),
    "shiprocket": LogisticsProvider(
        id="shiprocket",
        name="Shiprocket",
        description="Pan-India ecommerce shipping aggregator; supports hyperlocal and national shipping",
        cities=(ALL_CITIES,),
        base_fee_inr=50,
    ),
    "dunzo": LogisticsProvider(
        id="dunzo",
        name="Dunzo",
        description=(
            "Hyperlocal delivery partner for food and essentials; widely available "
            "in metro cities including Bangalore"
        ),
        cities=("Bangalore", "Delhi", "Gurugram", "Hyderabad", "Chennai", "Pune"),
        base_fee_inr=35,
    ),
    "ekart": LogisticsProvider(
        id="ekart",
        name="eKart",
        description="Flipkart's logistics arm; provides standard and express e-commerce deliveries across India",
        cities=(ALL_CITIES,),
        base_fee_inr=45,
    ),
    "ecomexpress": LogisticsProvider(
        id="ecomexpress",
        name="Ecom Express",
        description="Pan-India logistics provider offering hyperlocal, same-day and next-day delivery services",
        cities=(ALL_CITIES,),
        base_fee_inr=40,
    ),
    "grab": LogisticsProvider(
        id="grab",
        name="Grab",
        description="Hyperlocal delivery service specialising in quick commerce and F&B delivery",
        cities=("Bangalore", "Mumbai", "Delhi", "Hyderabad"),
        base_fee_inr=30,
    ),
    "delhivery": LogisticsProvider(
        id="delhivery",
        name="Delhivery",
        description=(
            "Large logistics provider offering express, same-day and next-day "
            "deliveries across most Indian pin codes"
        ),
        cities=(ALL_CITIES,),
        base_fee_inr=45,
    ),
    "dtdc": LogisticsProvider(
        id="dtdc",
        name="DTDC",
        description=(
            "Courier service that joined ONDC in 2023; offers next-day delivery, "
            "pick-up/drop-off and reverse logistics with coverage expanding to "
            "over 14,700 pin codes"
        ),
        cities=(ALL_CITIES,),
        base_fee_inr=50,
    ),
}


class LogisticsRegistry:
    """
    Read-only lookup over a set of logistics providers.

    Defaults to LOGISTICS_PROVIDERS; tests may pass their own mapping.
    """

    def __init__(self, providers: Optional[Dict[str, LogisticsProvider]] = None):
        self._providers = dict(LOGISTICS_PROVIDERS if providers is None else providers)

    def list_providers(self, city: Optional[str] = None) -> List[LogisticsProvider]:
        """
        Providers eligible for a city, in registry order.

        "All cities" providers always match. A provider with a restricted
        city list only matches when a non-empty city is given, so calling
        without a city returns the "All cities" providers alone.
        """
        city = (city or "").strip()
        return [
            p for p in self._providers.values()
            if p.serves_all_cities or (city and p.serves(city))
        ]

    def get_provider(self, provider_id: str) -> Optional[LogisticsProvider]:
        """Get provider by id, or None if unknown"""
        if not provider_id:
            return None
        return self._providers.get(provider_id)

    def exists(self, provider_id: str) -> bool:
        return self.get_provider(provider_id) is not None

    def get_all(self) -> List[LogisticsProvider]:
        return list(self._providers.values())

    def __len__(self) -> int:
        return len(self._providers)
