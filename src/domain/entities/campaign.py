"""
Domain Entities - Campaign

Value objects for the creative studio: the insight categories that trigger
a campaign, the templates drafts are rendered from, the mutable draft the
partner edits before launching, and the reach/cost estimate shown next to it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Set, Tuple, Union


class InsightType(str, Enum):
    """Business situation that motivates a promotional campaign."""

    SLOW_SALES = "slow_sales"
    PEAK_DEMAND = "peak_demand"
    WEATHER_OPPORTUNITY = "weather_opportunity"
    HOLIDAY_OPPORTUNITY = "holiday_opportunity"
    LOW_STOCK = "low_stock"
    RAINY_DAY = "rainy_day"
    PEAK_HOUR = "peak_hour"
    HOLIDAY = "holiday"
    LOW_TICKET = "low_ticket"
    CHURN_RISK = "churn_risk"

    @classmethod
    def parse(cls, value: Union["InsightType", str, None]) -> Optional["InsightType"]:
        """Return the matching member, or ``None`` for unknown values."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class BusinessType(str, Enum):
    """Vertical a partner operates in on the marketplace."""

    DELIVERY = "delivery"
    RESERVATION = "reservation"
    HOTEL = "hotel"
    TICKETS = "tickets"
    SCHEDULING = "scheduling"
    ECOMMERCE = "ecommerce"

    @classmethod
    def parse(cls, value: Union["BusinessType", str, None]) -> Optional["BusinessType"]:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class PricingModel(str, Enum):
    """How a boosted campaign is charged."""

    FIXED = "fixed"
    PAY_PER_VIEW = "pay_per_view"


@dataclass(frozen=True, slots=True)
class CampaignTemplate:
    """Static copy with a ``{product}`` placeholder in title and copy."""

    title: str
    copy: str
    image_prompt: str
    suggested_discount: int = 0
    tags: Tuple[str, ...] = ()

    def render(self, product_name: str) -> "CampaignDraft":
        return CampaignDraft(
            title=self.title.format(product=product_name),
            copy=self.copy.format(product=product_name),
            tags=set(self.tags),
            image_prompt=self.image_prompt,
            suggested_discount=self.suggested_discount,
        )


@dataclass(slots=True)
class CampaignDraft:
    """Scratch campaign the caller may edit before launch."""

    title: str
    copy: str
    tags: Set[str] = field(default_factory=set)
    image_prompt: str = ""
    suggested_discount: int = 0


@dataclass(frozen=True, slots=True)
class CampaignEstimate:
    """Simulated audience and price for a campaign radius."""

    radius_km: float
    potential_reach: int
    pricing_model: PricingModel
    estimated_cost: float
