"""
Shared module - Cross-cutting concerns / Shared Layer

This module holds the definitions every layer of the insights service may
depend on: environment names, log levels and the structured logging setup.
It must not import from Domain, Application, Infrastructure or Main.
"""

from .consts import DEFAULT_LOG_FORMAT, EnumEnvironment, EnumLogLevel
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "DEFAULT_LOG_FORMAT",
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
