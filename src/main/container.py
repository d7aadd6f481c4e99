"""
Dependency container injection module - Main Layer

Wires settings, the random source, the campaign composer and the use cases
together, and exposes them to the FastAPI controllers.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from src.application.models import InsightRules, SystemInfo
from src.application.use_cases.campaign_use_cases import (
    EstimateCampaignUseCase,
    GenerateCampaignUseCase,
    ListInsightTypesUseCase,
)
from src.application.use_cases.forecast_use_cases import PredictDemandUseCase
from src.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from src.application.use_cases.insight_use_cases import (
    GenerateOptimizationsUseCase,
    GetDashboardInsightsUseCase,
)
from src.domain.services.campaign_composer import CampaignComposer
from src.domain.services.campaign_templates import DEFAULT_CAMPAIGN_TEMPLATES
from src.infrastructure.services.random_source import SeededRandomSource
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    insight_rules = providers.Singleton(
        InsightRules,
        low_ticket_threshold=config.insights.low_ticket_threshold,
        high_ticket_threshold=config.insights.high_ticket_threshold,
        cancellation_rate_threshold=config.insights.cancellation_rate_threshold,
        trend_threshold_ratio=config.insights.trend_threshold_ratio,
        min_series_length=config.insights.min_series_length,
        dashboard_window_days=config.insights.dashboard_window_days,
        demo_min_orders=config.insights.demo_min_orders,
    )

    system_info = providers.Singleton(
        SystemInfo,
        title=config.service.title,
        description=config.service.description,
        version=config.service.version,
        environment=providers.Callable(
            lambda env: env.value if hasattr(env, "value") else str(env),
            config.environment,
        ),
        git_commit=config.service.git_commit,
        build_time=config.service.build_time,
    )

    # Infrastructure
    random_source = providers.Singleton(
        SeededRandomSource,
        seed=config.campaign.random_seed,
    )

    # Domain services
    campaign_composer = providers.Singleton(
        CampaignComposer,
        random_source=random_source,
        templates=providers.Object(DEFAULT_CAMPAIGN_TEMPLATES),
        reach_per_km=config.campaign.reach_per_km,
    )

    # Application (use cases)
    predict_demand_use_case = providers.Factory(
        PredictDemandUseCase,
        rules=insight_rules,
    )

    generate_optimizations_use_case = providers.Factory(
        GenerateOptimizationsUseCase,
        rules=insight_rules,
    )

    dashboard_insights_use_case = providers.Factory(
        GetDashboardInsightsUseCase,
        rules=insight_rules,
    )

    generate_campaign_use_case = providers.Factory(
        GenerateCampaignUseCase,
        composer=campaign_composer,
    )

    estimate_campaign_use_case = providers.Factory(
        EstimateCampaignUseCase,
        composer=campaign_composer,
        default_budget=config.campaign.default_budget,
    )

    list_insight_types_use_case = providers.Factory(
        ListInsightTypesUseCase,
        composer=campaign_composer,
    )

    get_health_status_use_case = providers.Factory(GetHealthStatusUseCase)

    get_application_info_use_case = providers.Factory(
        GetApplicationInfoUseCase,
        system_info=system_info,
        rules=insight_rules,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Lifecycle hook for the FastAPI lifespan.

    The service holds no external connections; startup eagerly builds the
    singletons so configuration errors surface before the first request.
    """
    container = get_container()

    try:
        container.insight_rules()
        container.campaign_composer()
        logger.info("container.resources.initialized")
        yield container
    finally:
        logger.info("container.resources.shutdown")
