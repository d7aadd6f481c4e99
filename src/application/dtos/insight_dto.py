"""
Application DTOs - Insights

Order snapshots sent by the dashboard and the suggestion payloads returned
to it.
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field

from src.application.dtos.forecast_dto import PredictionResultDTO
from src.domain.entities.dashboard import DashboardInsights
from src.domain.entities.order import Order, OrderStatus


class OrderDTO(BaseModel):
    """Subset of an order the insights rules read."""

    id: str = Field(description="Order identifier")
    created_at: datetime = Field(
        validation_alias=AliasChoices("created_at", "createdAt"),
        description="Creation timestamp (ISO8601)",
    )
    total: float = Field(description="Order total in the partner currency")
    status: OrderStatus = Field(
        default=OrderStatus.PENDING, description="Current order status"
    )

    def to_domain(self) -> Order:
        return Order(
            id=self.id,
            created_at=self.created_at,
            total=self.total,
            status=self.status,
        )


class OptimizationsRequestDTO(BaseModel):
    orders: List[OrderDTO] = Field(default_factory=list)

    def to_domain(self) -> List[Order]:
        return [order.to_domain() for order in self.orders]


class OptimizationsResponseDTO(BaseModel):
    """Suggestions in rule order (peak hour, ticket, cancellation)."""

    suggestions: List[str] = Field(default_factory=list)

    model_config = {
        "json_schema_extra": {
            "example": {
                "suggestions": [
                    "Horário de pico detectado às 19h. "
                    "Considere reforçar a equipe neste horário."
                ]
            }
        }
    }


class DashboardInsightsRequestDTO(BaseModel):
    orders: List[OrderDTO] = Field(default_factory=list)
    today: Optional[date] = Field(
        default=None,
        description="Last day of the revenue window (defaults to the server date)",
    )

    def to_domain(self) -> List[Order]:
        return [order.to_domain() for order in self.orders]


class DashboardInsightsResponseDTO(BaseModel):
    """Everything the dashboard insights card renders."""

    prediction: PredictionResultDTO
    optimizations: List[str] = Field(default_factory=list)
    series: List[float] = Field(
        default_factory=list, description="Daily revenue series that was forecast"
    )
    used_demo_series: bool = Field(
        default=False,
        description="True when too few orders existed and the demo series was used",
    )

    @classmethod
    def from_domain(cls, insights: DashboardInsights) -> "DashboardInsightsResponseDTO":
        return cls(
            prediction=PredictionResultDTO.from_domain(insights.prediction),
            optimizations=list(insights.optimizations),
            series=list(insights.series),
            used_demo_series=insights.used_demo_series,
        )
