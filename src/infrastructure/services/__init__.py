"""Infrastructure services package."""

from .random_source import SeededRandomSource

__all__ = ["SeededRandomSource"]
