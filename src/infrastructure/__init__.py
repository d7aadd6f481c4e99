"""
Infrastructure Layer Package

Implementations of the ports defined in the domain layer.
"""

from src.infrastructure import services

__all__ = ["services"]
