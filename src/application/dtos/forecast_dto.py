"""
Application DTOs - Forecast

Request and response payloads for the demand forecast endpoint.
"""

from typing import List

from pydantic import BaseModel, Field

from src.domain.entities.forecast import DemandTrend, PredictionResult


class DemandForecastRequestDTO(BaseModel):
    """Historical series to extrapolate, oldest bucket first."""

    series: List[float] = Field(
        default_factory=list,
        description="Chronological per-period values (e.g. daily orders or revenue)",
    )

    model_config = {
        "json_schema_extra": {
            "example": {"series": [1200, 1350, 1100, 1500, 1800, 1600, 1900]}
        }
    }


class PredictionResultDTO(BaseModel):
    """Next-period forecast with its confidence and trend label."""

    prediction: int = Field(ge=0, description="Forecast for the next period")
    confidence: int = Field(ge=0, le=100, description="Confidence score (0-100)")
    trend: DemandTrend = Field(description="Direction of the fitted trend")

    @classmethod
    def from_domain(cls, result: PredictionResult) -> "PredictionResultDTO":
        return cls(
            prediction=result.prediction,
            confidence=result.confidence,
            trend=result.trend,
        )

    model_config = {
        "json_schema_extra": {
            "example": {"prediction": 1964, "confidence": 84, "trend": "up"}
        }
    }
