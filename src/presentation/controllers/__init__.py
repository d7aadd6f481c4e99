"""
Controllers Package - Presentation Layer

FastAPI routers for the insights service. Controllers validate input
through the request DTOs, call the application use cases and map domain
errors onto HTTP status codes.
"""

from .campaigns_controller import router as campaigns_router
from .forecasts_controller import router as forecasts_router
from .insights_controller import router as insights_router
from .system_controller import router as system_router

__all__ = ["campaigns_router", "forecasts_router", "insights_router", "system_router"]
