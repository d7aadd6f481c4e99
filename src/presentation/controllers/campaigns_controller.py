"""
Presentation Layer - Campaigns Controller

Creative studio endpoints: draft a campaign, estimate its reach and cost,
and list the insight types that can be drafted.
"""

from typing import List

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from src.application.dtos.campaign_dto import (
    CampaignDraftDTO,
    CampaignEstimateDTO,
    CampaignEstimateRequestDTO,
    CampaignRequestDTO,
    InsightTypeOptionDTO,
)
from src.application.use_cases.campaign_use_cases import (
    EstimateCampaignUseCase,
    GenerateCampaignUseCase,
    ListInsightTypesUseCase,
)

router = APIRouter(prefix="/campaigns", tags=["Campaigns"])


@router.get(
    "/insight-types",
    response_model=List[InsightTypeOptionDTO],
    summary="List insight types available to the creative studio",
)
@inject
async def list_insight_types(
    list_insight_types_use_case: ListInsightTypesUseCase = Depends(
        Provide["list_insight_types_use_case"]
    ),
) -> List[InsightTypeOptionDTO]:
    return list_insight_types_use_case.execute()


@router.post(
    "/draft",
    response_model=CampaignDraftDTO,
    summary="Draft a campaign for an insight",
    description="""
    Render marketing copy for the insight category. Unknown categories are
    drafted from a generic template rather than rejected.
    """,
)
@inject
async def draft_campaign(
    payload: CampaignRequestDTO,
    generate_campaign_use_case: GenerateCampaignUseCase = Depends(
        Provide["generate_campaign_use_case"]
    ),
) -> CampaignDraftDTO:
    return generate_campaign_use_case.execute(payload)


@router.post(
    "/estimate",
    response_model=CampaignEstimateDTO,
    summary="Estimate campaign reach and cost",
)
@inject
async def estimate_campaign(
    payload: CampaignEstimateRequestDTO,
    estimate_campaign_use_case: EstimateCampaignUseCase = Depends(
        Provide["estimate_campaign_use_case"]
    ),
) -> CampaignEstimateDTO:
    return estimate_campaign_use_case.execute(payload)
