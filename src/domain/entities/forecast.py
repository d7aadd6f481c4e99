"""Domain entities for demand forecasts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DemandTrend(str, Enum):
    """Direction of the fitted slope relative to the series mean."""

    UP = "up"
    DOWN = "down"
    STABLE = "stable"


@dataclass(frozen=True, slots=True)
class PredictionResult:
    """Next-period forecast for a historical series."""

    prediction: int
    confidence: int
    trend: DemandTrend

    @classmethod
    def insufficient_data(cls) -> "PredictionResult":
        """Zero-confidence answer for series too short to fit."""
        return cls(prediction=0, confidence=0, trend=DemandTrend.STABLE)
