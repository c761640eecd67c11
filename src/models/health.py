"""Health payloads, outcomes and the health view-model."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


class HealthStatus(str, Enum):
    """Closed set of statuses the UI knows how to badge."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"
    UNKNOWN = "unknown"

    @classmethod
    def from_raw(cls, value: Any) -> "HealthStatus":
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return cls.UNKNOWN
        return _RAW_STATUS.get(value.strip().lower(), cls.UNKNOWN)


_RAW_STATUS = {
    "ok": HealthStatus.HEALTHY,
    "healthy": HealthStatus.HEALTHY,
    "degraded": HealthStatus.DEGRADED,
    "error": HealthStatus.UNHEALTHY,
    "unhealthy": HealthStatus.UNHEALTHY,
}


class OutcomeKind(str, Enum):
    """How a single health request ended."""

    OK = "ok"
    HTTP_ERROR = "http_error"
    NETWORK_FAILURE = "network_failure"
    NOT_CONFIGURED = "not_configured"


class TransportOutcome(BaseModel):
    """Transport-level result reported by the fetch boundary."""

    kind: OutcomeKind
    status_code: Optional[int] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, status_code: int = 200) -> "TransportOutcome":
        return cls(kind=OutcomeKind.OK, status_code=status_code)

    @classmethod
    def http_error(cls, status_code: int) -> "TransportOutcome":
        return cls(kind=OutcomeKind.HTTP_ERROR, status_code=status_code)

    @classmethod
    def network_failure(cls, error: str) -> "TransportOutcome":
        return cls(kind=OutcomeKind.NETWORK_FAILURE, error=error)

    @classmethod
    def not_configured(cls) -> "TransportOutcome":
        return cls(kind=OutcomeKind.NOT_CONFIGURED)


class SubsystemHealth(BaseModel):
    model_config = ConfigDict(extra="allow")

    status: Optional[str] = None


class RawHealthPayload(BaseModel):
    """Body of ``GET /api/health``; every field is optional."""

    model_config = ConfigDict(extra="allow")

    status: Optional[str] = None
    database: Optional[SubsystemHealth] = None
    cache: Optional[SubsystemHealth] = None
    timestamp: Optional[str] = None
    modules: Optional[Any] = None


class HealthViewModel(BaseModel):
    """Overall and per-subsystem health as shown on the dashboard badge."""

    overall: str = HealthStatus.UNKNOWN.value
    api: str = HealthStatus.UNKNOWN.value
    database: str = HealthStatus.UNKNOWN.value
    cache: str = HealthStatus.UNKNOWN.value
    timestamp: Optional[str] = None
    modules: Optional[Any] = None
    requires_login: bool = False
    error: Optional[str] = None
    glyphs: Dict[str, str] = Field(default_factory=dict)

    @computed_field
    @property
    def is_healthy(self) -> bool:
        return self.overall_status == HealthStatus.HEALTHY

    @computed_field
    @property
    def is_degraded(self) -> bool:
        return self.overall_status == HealthStatus.DEGRADED

    @computed_field
    @property
    def is_unhealthy(self) -> bool:
        return self.overall_status == HealthStatus.UNHEALTHY

    @property
    def overall_status(self) -> HealthStatus:
        return HealthStatus.from_raw(self.overall)
