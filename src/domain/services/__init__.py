"""
Domain Services Package

Pure, stateless business logic: demand forecasting, the optimization
rule pipeline, daily revenue aggregation and campaign composition.
"""

from .campaign_composer import CampaignComposer
from .demand_forecaster import predict_demand
from .insight_generator import generate_optimizations
from .revenue_aggregator import aggregate_daily_revenue

__all__ = [
    "CampaignComposer",
    "predict_demand",
    "generate_optimizations",
    "aggregate_daily_revenue",
]
