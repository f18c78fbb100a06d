"""
Application layer.

Use cases turn URL paths, stored period records and raw meter payloads into
domain calls, and return pydantic DTOs ready for the HTTP layer.
"""

from src.application import dtos, models, use_cases

__all__ = ["dtos", "models", "use_cases"]
