"""
Presentation Layer Package

HTTP surface of the insights service consumed by the partner dashboard.
"""

from src.presentation import controllers

__all__ = ["controllers"]
