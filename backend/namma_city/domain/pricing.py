"""
Platform pricing constants

Subscription fee charged to sellers and the ONDC per-transaction network fee.
"""
from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class SubscriptionFee:
    plan: str
    amountINR: float
    currency: str
    description: str


@dataclass(frozen=True)
class OndcFee:
    effectiveFrom: str
    amountINR: float
    currency: str
    thresholdINR: float
    description: str


SUBSCRIPTION_FEE = SubscriptionFee(
    plan="monthly",
    amountINR=1000,
    currency="INR",
    description=(
        "Monthly subscription fee for sellers using the Namma City platform. "
        "Gives access to product listing, order management and integrations "
        "with ONDC logistics partners."
    ),
)

ONDC_FEE = OndcFee(
    effectiveFrom="2025-01-01",
    amountINR=1.5,
    currency="INR",
    thresholdINR=250,
    description=(
        "Per-transaction network fee charged by ONDC for each successful "
        "transaction above INR 250 (exclusive of taxes). This fee is collected "
        "by ONDC and passed through to Seller Network Participants."
    ),
)


def get_pricing() -> dict:
    """Pricing constants as returned by GET /api/pricing"""
    return {
        "subscriptionFee": asdict(SUBSCRIPTION_FEE),
        "ondcFee": asdict(ONDC_FEE),
    }
