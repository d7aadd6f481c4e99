"""Use case exposing the demand forecaster."""

from typing import Sequence

import structlog

from src.application.dtos.forecast_dto import PredictionResultDTO
from src.application.models import InsightRules
from src.domain.services.demand_forecaster import predict_demand

logger = structlog.get_logger(__name__)


class PredictDemandUseCase:
    """Forecast the next period of a historical series."""

    def __init__(self, rules: InsightRules) -> None:
        self._rules = rules

    def execute(self, series: Sequence[float]) -> PredictionResultDTO:
        result = predict_demand(
            list(series),
            min_length=self._rules.min_series_length,
            trend_threshold_ratio=self._rules.trend_threshold_ratio,
        )
        logger.info(
            "forecast.predicted",
            points=len(series),
            prediction=result.prediction,
            confidence=result.confidence,
            trend=result.trend.value,
        )
        return PredictionResultDTO.from_domain(result)
