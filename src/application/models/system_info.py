"""Build metadata reported by the /info endpoint."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SystemInfo:
    title: str
    description: str
    version: str
    environment: str
    git_commit: str = "unknown"
    build_time: str = "unknown"
