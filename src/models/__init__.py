"""Pydantic models for customer records, health checks and view-models."""

from models.customer import (  # noqa: F401
    AtRiskCustomerEntry,
    CustomerDashboardViewModel,
    CustomerRecord,
    CustomerSummary,
    LifetimeValueSummary,
    RiskBasis,
    Segment,
    SegmentSummary,
    TopCustomerEntry,
)
from models.health import (  # noqa: F401
    HealthStatus,
    HealthViewModel,
    OutcomeKind,
    RawHealthPayload,
    SubsystemHealth,
    TransportOutcome,
)
from models.result import LoadResult, LoadState  # noqa: F401
