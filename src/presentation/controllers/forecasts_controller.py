"""
Presentation Layer - Forecasts Controller

Exposes the demand forecaster to the dashboard.
"""

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException

from src.application.dtos.forecast_dto import (
    DemandForecastRequestDTO,
    PredictionResultDTO,
)
from src.application.use_cases.forecast_use_cases import PredictDemandUseCase
from src.domain.entities.errors import InvalidArgumentError
from src.presentation.controllers.errors import invalid_argument_to_http

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/forecasts", tags=["Forecasts"])


@router.post(
    "/demand",
    response_model=PredictionResultDTO,
    summary="Forecast next-period demand",
    description="""
    Fit a linear trend to the historical series and extrapolate one period
    ahead. Series shorter than three points return a zero-confidence
    `stable` forecast instead of an error.
    """,
)
@inject
async def predict_demand(
    payload: DemandForecastRequestDTO,
    predict_demand_use_case: PredictDemandUseCase = Depends(
        Provide["predict_demand_use_case"]
    ),
) -> PredictionResultDTO:
    try:
        return predict_demand_use_case.execute(payload.series)
    except InvalidArgumentError as exc:
        raise invalid_argument_to_http(exc) from exc
    except Exception as exc:  # pragma: no cover - defensive logging
        logger.error("forecast.unexpected_error", error=str(exc), exc_info=exc)
        raise HTTPException(status_code=500, detail="Internal server error")
