"""Domain ports package."""

from .random_source import IRandomSource

__all__ = ["IRandomSource"]
