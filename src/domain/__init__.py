"""
Domain Layer Package

This package contains the calendar period model, the measurement
entities and the alignment engine. It has no dependencies on
frameworks or transport concerns.
"""

# Re-export submodules
from src.domain import entities, services

__all__ = ["entities", "services"]
