"""Plain configuration carriers handed to use cases by the container."""

from .system_info import InsightRules, SystemInfo

__all__ = ["InsightRules", "SystemInfo"]
