"""
Presentation Layer - Insights Controller

Optimization suggestions and the combined dashboard insights card.
"""

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException

from src.application.dtos.insight_dto import (
    DashboardInsightsRequestDTO,
    DashboardInsightsResponseDTO,
    OptimizationsRequestDTO,
    OptimizationsResponseDTO,
)
from src.application.use_cases.insight_use_cases import (
    GenerateOptimizationsUseCase,
    GetDashboardInsightsUseCase,
)
from src.domain.entities.errors import InvalidArgumentError
from src.presentation.controllers.errors import invalid_argument_to_http

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/insights", tags=["Insights"])


@router.post(
    "/optimizations",
    response_model=OptimizationsResponseDTO,
    summary="Generate operational suggestions from orders",
)
@inject
async def generate_optimizations(
    payload: OptimizationsRequestDTO,
    generate_optimizations_use_case: GenerateOptimizationsUseCase = Depends(
        Provide["generate_optimizations_use_case"]
    ),
) -> OptimizationsResponseDTO:
    try:
        return generate_optimizations_use_case.execute(payload.to_domain())
    except InvalidArgumentError as exc:
        raise invalid_argument_to_http(exc) from exc
    except Exception as exc:  # pragma: no cover - defensive logging
        logger.error("insights.unexpected_error", error=str(exc), exc_info=exc)
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post(
    "/dashboard",
    response_model=DashboardInsightsResponseDTO,
    summary="Build the dashboard insights card",
    description="""
    Aggregate the orders into a daily revenue window, forecast the next day
    and attach the optimization suggestions. Partners with too few orders
    get a forecast of a demonstration series.
    """,
)
@inject
async def get_dashboard_insights(
    payload: DashboardInsightsRequestDTO,
    dashboard_insights_use_case: GetDashboardInsightsUseCase = Depends(
        Provide["dashboard_insights_use_case"]
    ),
) -> DashboardInsightsResponseDTO:
    try:
        return dashboard_insights_use_case.execute(
            payload.to_domain(), today=payload.today
        )
    except InvalidArgumentError as exc:
        raise invalid_argument_to_http(exc) from exc
    except Exception as exc:  # pragma: no cover - defensive logging
        logger.error(
            "insights.dashboard.unexpected_error", error=str(exc), exc_info=exc
        )
        raise HTTPException(status_code=500, detail="Internal server error")
