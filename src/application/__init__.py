"""
Application Layer Package

Use cases, DTOs and configuration carriers that sit between the pure
insights domain and the HTTP presentation layer.
"""

# Re-export submodules
from src.application import dtos, models, use_cases

__all__ = ["dtos", "use_cases", "models"]
