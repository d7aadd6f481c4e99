"""Use cases backing the creative studio."""

from typing import List, Optional

import structlog

from src.application.dtos.campaign_dto import (
    CampaignDraftDTO,
    CampaignEstimateDTO,
    CampaignEstimateRequestDTO,
    CampaignRequestDTO,
    InsightTypeOptionDTO,
)
from src.domain.entities.campaign import InsightType
from src.domain.services.campaign_composer import CampaignComposer

logger = structlog.get_logger(__name__)


class GenerateCampaignUseCase:
    """Draft a campaign for an insight category."""

    def __init__(self, composer: CampaignComposer) -> None:
        self._composer = composer

    def execute(self, request: CampaignRequestDTO) -> CampaignDraftDTO:
        draft = self._composer.generate_campaign(
            request.insight_type,
            request.business_category,
            request.product_name,
        )
        logger.info(
            "campaign.drafted",
            insight_type=request.insight_type,
            business_category=request.business_category,
            known_template=self._composer.has_template(request.insight_type),
        )
        return CampaignDraftDTO.from_domain(draft)


class EstimateCampaignUseCase:
    """Estimate reach and cost for a campaign radius."""

    def __init__(
        self, composer: CampaignComposer, default_budget: Optional[float] = None
    ) -> None:
        self._composer = composer
        self._default_budget = default_budget

    def execute(self, request: CampaignEstimateRequestDTO) -> CampaignEstimateDTO:
        budget = request.budget
        if "budget" not in request.model_fields_set and self._default_budget is not None:
            budget = self._default_budget

        estimate = self._composer.estimate(
            request.radius_km, request.pricing_model, budget
        )
        logger.info(
            "campaign.estimated",
            radius_km=estimate.radius_km,
            pricing_model=estimate.pricing_model.value,
            potential_reach=estimate.potential_reach,
            estimated_cost=estimate.estimated_cost,
        )
        return CampaignEstimateDTO.from_domain(estimate)


class ListInsightTypesUseCase:
    """Use case for listing the insight types the studio can draft for."""

    def __init__(self, composer: CampaignComposer) -> None:
        self._composer = composer

    def execute(self) -> List[InsightTypeOptionDTO]:
        return [
            InsightTypeOptionDTO(
                value=insight_type,
                label=insight_type.value.replace("_", " ").title(),
                has_template=self._composer.has_template(insight_type),
            )
            for insight_type in InsightType
        ]
