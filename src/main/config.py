"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
Values come from environment variables, a ``.env`` file and the defaults
below; nested groups can also be set with ``__`` (e.g. ``INSIGHTS__...``).
"""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.shared import DEFAULT_LOG_FORMAT, EnumEnvironment, EnumLogLevel


class ServiceSettings(BaseSettings):
    """HTTP service metadata and server options."""

    title: str = Field(default="Meu Agito Insights", description="Service title")
    description: str = Field(
        default="Demand forecasts, optimization suggestions and campaign "
        "drafts for Meu Agito partners",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    git_commit: str = Field(
        default="unknown",
        description="Git commit hash",
        validation_alias=AliasChoices("SERVICE_GIT_COMMIT", "GIT_COMMIT"),
    )
    build_time: str = Field(
        default="unknown",
        description="Build timestamp",
        validation_alias=AliasChoices("SERVICE_BUILD_TIME", "BUILD_TIME"),
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    host: str = Field(default="0.0.0.0", description="Interface to bind the server")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="SERVICE_", case_sensitive=False, extra="ignore"
    )


class InsightsSettings(BaseSettings):
    """Thresholds of the forecasting and suggestion rules."""

    low_ticket_threshold: float = Field(
        default=50.0, ge=0, description="Average ticket below this suggests combos"
    )
    high_ticket_threshold: float = Field(
        default=150.0,
        ge=0,
        description="Average ticket above this suggests loyalty programs",
    )
    cancellation_rate_threshold: float = Field(
        default=0.10,
        ge=0,
        le=1,
        description="Cancelled share strictly above this raises a warning",
    )
    trend_threshold_ratio: float = Field(
        default=0.05, ge=0, description="Slope/mean ratio separating up/down/stable"
    )
    min_series_length: int = Field(
        default=3, ge=1, description="Shorter series get a zero-confidence forecast"
    )
    dashboard_window_days: int = Field(
        default=7, ge=1, description="Days of revenue forecast by the dashboard"
    )
    demo_min_orders: int = Field(
        default=5,
        ge=0,
        description="Below this many orders the dashboard forecasts a demo series",
    )

    model_config = SettingsConfigDict(
        env_prefix="INSIGHTS_", case_sensitive=False, extra="ignore"
    )


class CampaignSettings(BaseSettings):
    """Creative studio estimation settings."""

    reach_per_km: float = Field(
        default=1250.0, gt=0, description="Base audience per km of radius"
    )
    random_seed: Optional[int] = Field(
        default=None,
        description="Seed for template picks and reach estimates (unset = random)",
    )
    default_budget: float = Field(
        default=50.0, ge=0, description="Pay-per-view budget when none is given"
    )

    model_config = SettingsConfigDict(
        env_prefix="CAMPAIGN_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default=DEFAULT_LOG_FORMAT,
        description="stdlib format around the rendered event (%(message)s)",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    service: ServiceSettings = Field(default_factory=ServiceSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    insights: InsightsSettings = Field(default_factory=InsightsSettings)
    campaign: CampaignSettings = Field(default_factory=CampaignSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on environment.
    """
    return AppSettings()


settings = get_settings()
