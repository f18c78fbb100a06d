"""
Presentation layer: the HTTP routers exposing periods, graph metadata,
series alignment and system status.
"""

from src.presentation import controllers

__all__ = ["controllers"]
