"""
DTOs Package - Application Layer

Data Transfer Objects exchanged between the application layer and the
presentation layer.
"""

from .campaign_dto import (
    CampaignDraftDTO,
    CampaignEstimateDTO,
    CampaignEstimateRequestDTO,
    CampaignRequestDTO,
    InsightTypeOptionDTO,
)
from .forecast_dto import DemandForecastRequestDTO, PredictionResultDTO
from .health_dto import ApplicationInfoDTO, SystemHealthDTO
from .insight_dto import (
    DashboardInsightsRequestDTO,
    DashboardInsightsResponseDTO,
    OptimizationsRequestDTO,
    OptimizationsResponseDTO,
    OrderDTO,
)

__all__ = [
    "CampaignDraftDTO",
    "CampaignEstimateDTO",
    "CampaignEstimateRequestDTO",
    "CampaignRequestDTO",
    "InsightTypeOptionDTO",
    "DemandForecastRequestDTO",
    "PredictionResultDTO",
    "ApplicationInfoDTO",
    "SystemHealthDTO",
    "DashboardInsightsRequestDTO",
    "DashboardInsightsResponseDTO",
    "OptimizationsRequestDTO",
    "OptimizationsResponseDTO",
    "OrderDTO",
]
