"""Domain entity grouping everything the dashboard insights card shows."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from src.domain.entities.forecast import PredictionResult


@dataclass(slots=True)
class DashboardInsights:
    prediction: PredictionResult
    optimizations: List[str] = field(default_factory=list)
    series: List[float] = field(default_factory=list)
    used_demo_series: bool = False
