"""
Application Use Cases - Insights

Optimization suggestions for a set of orders, and the combined payload of
the dashboard insights card (daily revenue forecast plus suggestions).
"""

from datetime import date
from typing import List, Optional, Sequence

import structlog

from src.application.dtos.insight_dto import (
    DashboardInsightsResponseDTO,
    OptimizationsResponseDTO,
)
from src.application.models import InsightRules
from src.domain.entities.dashboard import DashboardInsights
from src.domain.entities.order import Order
from src.domain.services.demand_forecaster import predict_demand
from src.domain.services.input_validator import validate_orders
from src.domain.services.insight_generator import generate_optimizations
from src.domain.services.revenue_aggregator import (
    DEMO_REVENUE_SERIES,
    aggregate_daily_revenue,
)

logger = structlog.get_logger(__name__)


def _optimizations(orders: Sequence[Order], rules: InsightRules) -> List[str]:
    return generate_optimizations(
        orders,
        low_ticket_threshold=rules.low_ticket_threshold,
        high_ticket_threshold=rules.high_ticket_threshold,
        cancellation_rate_threshold=rules.cancellation_rate_threshold,
    )


class GenerateOptimizationsUseCase:
    """Run the suggestion rules over an order snapshot."""

    def __init__(self, rules: InsightRules) -> None:
        self._rules = rules

    def execute(self, orders: Sequence[Order]) -> OptimizationsResponseDTO:
        suggestions = _optimizations(orders, self._rules)
        logger.info(
            "insights.generated", orders=len(orders), suggestions=len(suggestions)
        )
        return OptimizationsResponseDTO(suggestions=suggestions)


class GetDashboardInsightsUseCase:
    """
    Build the insights card: forecast of the daily revenue window plus the
    optimization suggestions.

    With fewer than ``rules.demo_min_orders`` orders the forecast runs on a
    demo series so new partners still see a populated card.
    """

    def __init__(self, rules: InsightRules) -> None:
        self._rules = rules

    def execute(
        self, orders: Sequence[Order], today: Optional[date] = None
    ) -> DashboardInsightsResponseDTO:
        validate_orders(orders)

        used_demo = len(orders) < self._rules.demo_min_orders
        if used_demo:
            series = list(DEMO_REVENUE_SERIES)
        else:
            series = aggregate_daily_revenue(
                orders, days=self._rules.dashboard_window_days, today=today
            )

        prediction = predict_demand(
            series,
            min_length=self._rules.min_series_length,
            trend_threshold_ratio=self._rules.trend_threshold_ratio,
        )
        insights = DashboardInsights(
            prediction=prediction,
            optimizations=_optimizations(orders, self._rules),
            series=series,
            used_demo_series=used_demo,
        )

        logger.info(
            "insights.dashboard.built",
            orders=len(orders),
            used_demo_series=used_demo,
            prediction=prediction.prediction,
            trend=prediction.trend.value,
        )
        return DashboardInsightsResponseDTO.from_domain(insights)
