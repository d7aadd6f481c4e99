"""
Domain Entities Package

Value objects of the insights domain: orders read from the dashboard,
forecast results, campaign drafts and service health.
"""

from .campaign import (
    BusinessType,
    CampaignDraft,
    CampaignEstimate,
    CampaignTemplate,
    InsightType,
    PricingModel,
)
from .dashboard import DashboardInsights
from .errors import DomainError, InvalidArgumentError
from .forecast import DemandTrend, PredictionResult
from .health import ApplicationInfo, ServiceStatus, SystemHealth
from .order import Order, OrderStatus

__all__ = [
    "BusinessType",
    "CampaignDraft",
    "CampaignEstimate",
    "CampaignTemplate",
    "InsightType",
    "PricingModel",
    "DashboardInsights",
    "DomainError",
    "InvalidArgumentError",
    "DemandTrend",
    "PredictionResult",
    "ApplicationInfo",
    "ServiceStatus",
    "SystemHealth",
    "Order",
    "OrderStatus",
]
