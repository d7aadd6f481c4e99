"""
Domain Service - Campaign Composer

Drafts promotional campaigns from a template table and estimates how many
people a boosted campaign reaches for a given radius and what it costs.

The template table and the random source are injected so the composer holds
no module-level state and tests can pin the random picks.
"""

import math
from typing import Mapping, Optional, Sequence, Tuple, Union

import structlog

from src.domain.entities.campaign import (
    BusinessType,
    CampaignDraft,
    CampaignEstimate,
    CampaignTemplate,
    InsightType,
    PricingModel,
)
from src.domain.ports.random_source import IRandomSource
from src.domain.services.campaign_templates import (
    DEFAULT_CAMPAIGN_TEMPLATES,
    DEFAULT_PRODUCT_NAME,
    FALLBACK_TEMPLATE,
)

logger = structlog.get_logger(__name__)

REACH_PER_KM = 1250
REACH_FACTOR_MIN = 0.8
REACH_FACTOR_SPAN = 0.5
DEFAULT_BUDGET = 50.0

# (max radius in km, price) steps of the fixed package
FIXED_PACKAGE_PRICES: Tuple[Tuple[float, float], ...] = ((2, 9.90), (5, 29.90))
FIXED_PACKAGE_MAX_PRICE = 49.90

TemplateTable = Mapping[InsightType, Sequence[CampaignTemplate]]
BusinessTemplateTable = Mapping[
    Tuple[BusinessType, InsightType], Sequence[CampaignTemplate]
]


class CampaignComposer:
    """Template-driven campaign drafting plus reach/cost estimation."""

    def __init__(
        self,
        random_source: IRandomSource,
        templates: Optional[TemplateTable] = None,
        business_templates: Optional[BusinessTemplateTable] = None,
        fallback_template: CampaignTemplate = FALLBACK_TEMPLATE,
        reach_per_km: float = REACH_PER_KM,
    ) -> None:
        self._random = random_source
        self._templates = dict(
            DEFAULT_CAMPAIGN_TEMPLATES if templates is None else templates
        )
        self._business_templates = dict(business_templates or {})
        self._fallback = fallback_template
        self._reach_per_km = reach_per_km

    def has_template(self, insight_type: Union[InsightType, str]) -> bool:
        parsed = InsightType.parse(insight_type)
        return parsed is not None and bool(self._templates.get(parsed))

    def _candidates(
        self,
        insight_type: Optional[InsightType],
        business_type: Optional[BusinessType],
    ) -> Sequence[CampaignTemplate]:
        if insight_type is None:
            return (self._fallback,)
        if business_type is not None:
            specific = self._business_templates.get((business_type, insight_type))
            if specific:
                return specific
        return self._templates.get(insight_type) or (self._fallback,)

    def _pick(self, candidates: Sequence[CampaignTemplate]) -> CampaignTemplate:
        index = math.floor(self._random.random() * len(candidates))
        return candidates[min(index, len(candidates) - 1)]

    def generate_campaign(
        self,
        insight_type: Union[InsightType, str],
        business_category: Union[BusinessType, str, None] = None,
        product_name: Optional[str] = None,
    ) -> CampaignDraft:
        """Render a fresh draft for ``insight_type``.

        Unknown insight types and business categories never raise: the
        fallback template is used instead.
        """
        parsed_insight = InsightType.parse(insight_type)
        parsed_business = BusinessType.parse(business_category)
        if parsed_insight is None:
            logger.debug(
                "campaign.template.fallback", insight_type=str(insight_type)
            )

        product = (product_name or "").strip() or DEFAULT_PRODUCT_NAME
        template = self._pick(self._candidates(parsed_insight, parsed_business))
        return template.render(product)

    def estimate_reach(self, radius_km: float) -> int:
        """Simulated audience: ``radius * reach_per_km * factor``, factor in [0.8, 1.3)."""
        factor = REACH_FACTOR_MIN + self._random.random() * REACH_FACTOR_SPAN
        # keep the upper bound open when the sum rounds up to exactly 1.3
        factor = min(factor, math.nextafter(REACH_FACTOR_MIN + REACH_FACTOR_SPAN, 0.0))
        return int(math.floor(radius_km * self._reach_per_km * factor))

    @staticmethod
    def estimate_cost(
        radius_km: float,
        pricing_model: Union[PricingModel, str] = PricingModel.FIXED,
        budget: float = DEFAULT_BUDGET,
    ) -> float:
        """Fixed package price by radius step, or the caller's pay-per-view budget."""
        if PricingModel(pricing_model) is PricingModel.PAY_PER_VIEW:
            return float(budget)
        for max_radius, price in FIXED_PACKAGE_PRICES:
            if radius_km <= max_radius:
                return price
        return FIXED_PACKAGE_MAX_PRICE

    def estimate(
        self,
        radius_km: float,
        pricing_model: Union[PricingModel, str] = PricingModel.FIXED,
        budget: float = DEFAULT_BUDGET,
    ) -> CampaignEstimate:
        model = PricingModel(pricing_model)
        return CampaignEstimate(
            radius_km=radius_km,
            potential_reach=self.estimate_reach(radius_km),
            pricing_model=model,
            estimated_cost=self.estimate_cost(radius_km, model, budget),
        )
