"""
Health status reduction.

Collapses the outcome of one ``GET /api/health`` call into the overall
status and per-subsystem statuses shown on the dashboard badge. Each call
is independent; there is no state carried between calls.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Optional, Union

from models.health import (
    HealthStatus,
    HealthViewModel,
    OutcomeKind,
    RawHealthPayload,
    TransportOutcome,
)
from utils.logging_config import get_logger

logger = get_logger(__name__)

STATUS_GLYPHS: Dict[HealthStatus, str] = {
    HealthStatus.HEALTHY: "✓",
    HealthStatus.DEGRADED: "⚠",
    HealthStatus.UNHEALTHY: "✗",
    HealthStatus.UNKNOWN: "?",
}

UNKNOWN = HealthStatus.UNKNOWN.value


def status_glyph(status: Any) -> str:
    """Glyph for a raw or enum status; unrecognized values get the unknown glyph."""
    return STATUS_GLYPHS.get(HealthStatus.from_raw(status), STATUS_GLYPHS[HealthStatus.UNKNOWN])


def _subsystem_status(section: Any) -> Optional[str]:
    if isinstance(section, Mapping):
        status = section.get("status")
        if status:
            return str(status)
    return None


class HealthReducer:
    """Maps a health-check outcome and optional payload onto a HealthViewModel."""

    def reduce(
        self,
        raw_payload: Union[RawHealthPayload, Mapping, None],
        outcome: TransportOutcome,
    ) -> HealthViewModel:
        if outcome.kind == OutcomeKind.OK:
            view = self._from_payload(raw_payload)
        elif outcome.kind == OutcomeKind.HTTP_ERROR and outcome.status_code == 401:
            view = HealthViewModel(
                overall="unauthenticated",
                api="unauthorized",
                requires_login=True,
                error="Please log in to view system health",
            )
        elif outcome.kind == OutcomeKind.HTTP_ERROR:
            view = HealthViewModel(
                overall=HealthStatus.DEGRADED.value,
                api="error",
                error=f"Health endpoint returned HTTP {outcome.status_code}",
            )
        elif outcome.kind == OutcomeKind.NETWORK_FAILURE:
            view = HealthViewModel(
                overall=HealthStatus.UNHEALTHY.value,
                api="unreachable",
                error=outcome.error,
            )
        else:
            view = HealthViewModel(overall=UNKNOWN, api="not configured")

        view.glyphs = {
            name: status_glyph(getattr(view, name))
            for name in ("overall", "api", "database", "cache")
        }
        logger.info(
            "Health reduced",
            extra={"outcome": outcome.kind.value, "overall": view.overall},
        )
        return view

    def _from_payload(self, raw_payload: Union[RawHealthPayload, Mapping, None]) -> HealthViewModel:
        if isinstance(raw_payload, RawHealthPayload):
            payload: Mapping = raw_payload.model_dump()
        elif isinstance(raw_payload, Mapping):
            payload = raw_payload
        else:
            payload = {}

        healthy = HealthStatus.HEALTHY.value
        timestamp = payload.get("timestamp")
        return HealthViewModel(
            overall=str(payload.get("status") or healthy),
            api=healthy,
            database=_subsystem_status(payload.get("database")) or healthy,
            cache=_subsystem_status(payload.get("cache")) or healthy,
            timestamp=str(timestamp) if timestamp is not None else None,
            modules=payload.get("modules"),
        )


def reduce_health(
    raw_payload: Union[RawHealthPayload, Mapping, None],
    outcome: TransportOutcome,
) -> HealthViewModel:
    return HealthReducer().reduce(raw_payload, outcome)
