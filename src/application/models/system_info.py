"""Lightweight settings structures consumed by the application layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SystemInfo:
    """Subset of configuration required by system-related use cases."""

    title: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str


@dataclass(frozen=True)
class InsightRules:
    """Thresholds applied by the forecasting and optimization use cases."""

    low_ticket_threshold: float = 50.0
    high_ticket_threshold: float = 150.0
    cancellation_rate_threshold: float = 0.10
    trend_threshold_ratio: float = 0.05
    min_series_length: int = 3
    dashboard_window_days: int = 7
    demo_min_orders: int = 5
