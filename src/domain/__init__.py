"""
Domain Layer Package

Core insights logic: entities, ports and services, with no dependency
on frameworks or infrastructure.
"""

# Re-export submodules
from src.domain import entities, ports, services

__all__ = ["entities", "ports", "services"]
