"""DTOs for system health and application info responses."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel, Field

from src.domain.entities.health import ApplicationInfo, ServiceStatus, SystemHealth


class SystemHealthDTO(BaseModel):
    """DTO representing the /health response payload."""

    status: ServiceStatus = Field(description="Overall system status")
    checks: Dict[str, bool] = Field(
        default_factory=dict, description="Outcome of each self check"
    )

    @classmethod
    def from_domain(cls, health: SystemHealth) -> "SystemHealthDTO":
        return cls(status=health.status, checks=dict(health.checks))

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "up",
                "checks": {"timezone": True, "first_measurement": True},
            }
        }
    }


class ApplicationInfoDTO(BaseModel):
    """DTO representing metadata returned by /info."""

    name: str = Field(description="Application name")
    description: str = Field(description="Application description")
    version: str = Field(description="Application version")
    environment: str = Field(description="Current deployment environment")
    git_commit: str = Field(description="Git commit hash")
    build_time: str = Field(description="Build timestamp")
    started_at: datetime = Field(description="Application start timestamp")
    uptime_seconds: float = Field(description="Uptime in seconds")
    status: ServiceStatus = Field(description="Overall system status")
    metering: Dict[str, Any] = Field(
        default_factory=dict, description="Meter timezone and data horizon"
    )

    @classmethod
    def from_domain(cls, info: ApplicationInfo) -> "ApplicationInfoDTO":
        return cls(
            name=info.name,
            description=info.description,
            version=info.version,
            environment=info.environment,
            git_commit=info.git_commit,
            build_time=info.build_time,
            started_at=info.started_at,
            uptime_seconds=info.uptime_seconds,
            status=info.status,
            metering=info.metering,
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Meter Periods",
                "description": "Calendar navigation and series alignment for meter readings",
                "version": "1.0.0",
                "environment": "development",
                "git_commit": "abcdef1",
                "build_time": "2024-09-09T11:30:00Z",
                "started_at": "2024-09-09T12:00:00Z",
                "uptime_seconds": 3600.5,
                "status": "up",
                "metering": {
                    "timezone": "Europe/Amsterdam",
                    "first_measurement_date": "2014-03-03",
                    "value_precision": 3,
                },
            }
        }
    }
