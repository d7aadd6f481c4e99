"""
Use Cases Package - Application Layer

Use cases orchestrate the domain services and translate their results
into DTOs for the presentation layer.
"""

from .campaign_use_cases import (
    EstimateCampaignUseCase,
    GenerateCampaignUseCase,
    ListInsightTypesUseCase,
)
from .forecast_use_cases import PredictDemandUseCase
from .health_use_cases import GetApplicationInfoUseCase, GetHealthStatusUseCase
from .insight_use_cases import GenerateOptimizationsUseCase, GetDashboardInsightsUseCase

__all__ = [
    "EstimateCampaignUseCase",
    "GenerateCampaignUseCase",
    "ListInsightTypesUseCase",
    "PredictDemandUseCase",
    "GetApplicationInfoUseCase",
    "GetHealthStatusUseCase",
    "GenerateOptimizationsUseCase",
    "GetDashboardInsightsUseCase",
]
