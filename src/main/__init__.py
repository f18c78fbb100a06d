"""
Composition root.

Loads settings, configures logging, builds the dependency container around
the meter configuration and assembles the FastAPI application.
"""

from .config import AppSettings, get_settings
from .container import AppContainer, get_container, init_container

__all__ = [
    "AppContainer",
    "AppSettings",
    "get_container",
    "get_settings",
    "init_container",
]
