"""Customer records and the customer dashboard view-model."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from utils.parsing import parse_amount, parse_count, parse_timestamp


class Segment(str, Enum):
    """Mutually exclusive customer classification."""

    VIP = "vip"
    ACTIVE = "active"
    NEW = "new"
    INACTIVE = "inactive"

    @classmethod
    def normalize(cls, value: Any) -> "Segment":
        """Map a raw segment value onto the enum; absent or unknown -> NEW."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return cls.NEW
        return cls.NEW

    @property
    def label(self) -> str:
        return self.value.capitalize()


class CustomerRecord(BaseModel):
    """
    One customer as delivered by ``GET /api/customers``.

    Every field is parsed leniently so a malformed record degrades to
    defaults instead of failing validation.
    """

    model_config = ConfigDict(extra="ignore")

    id: Optional[Any] = None
    name: str = ""
    email: str = ""
    total_spent: float = 0.0
    order_count: int = 0
    segment: Segment = Segment.NEW
    last_order_at: Optional[datetime] = None

    @field_validator("name", "email", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @field_validator("total_spent", mode="before")
    @classmethod
    def coerce_amount(cls, value: Any) -> float:
        return parse_amount(value)

    @field_validator("order_count", mode="before")
    @classmethod
    def coerce_count(cls, value: Any) -> int:
        return parse_count(value)

    @field_validator("segment", mode="before")
    @classmethod
    def coerce_segment(cls, value: Any) -> Segment:
        return Segment.normalize(value)

    @field_validator("last_order_at", mode="before")
    @classmethod
    def coerce_last_order(cls, value: Any) -> Optional[datetime]:
        return parse_timestamp(value)


class SegmentSummary(BaseModel):
    """Per-segment slice of the customer base."""

    key: Segment
    name: str
    count: int
    percent: float
    total_value: float
    color_token: str
    icon_token: str


class CustomerSummary(BaseModel):
    """Headline counts. Period-over-period fields stay None (no history)."""

    total_customers: int = 0
    new_this_month: int = 0
    active_customers: int = 0
    active_percent: float = 0.0
    customers_change: Optional[float] = None
    new_change: Optional[float] = None
    churned_this_month: Optional[int] = None
    churn_rate: Optional[float] = None


class LifetimeValueSummary(BaseModel):
    """Lifetime value statistics over all customers."""

    average: float = 0.0
    median: float = 0.0
    top_decile_value: float = Field(
        default=0.0,
        description="Spend of the single highest spender; stands in for a percentile",
    )
    change: Optional[float] = None


class TopCustomerEntry(BaseModel):
    rank: int = Field(ge=1)
    id: Optional[Any] = None
    name: str
    email: str
    total_spent: float
    order_count: int
    segment: Segment
    last_order_at: Optional[datetime] = None


class RiskBasis(str, Enum):
    """Where an at-risk score came from."""

    RECENCY_FREQUENCY = "recency_frequency"
    PLACEHOLDER = "placeholder"


class AtRiskCustomerEntry(BaseModel):
    id: Optional[Any] = None
    name: str
    email: str
    total_spent: float
    last_order_at: Optional[datetime] = None
    risk_score: int = Field(ge=0, le=100)
    risk_level: str = Field(description="low|medium|high")
    risk_basis: RiskBasis


class CustomerDashboardViewModel(BaseModel):
    """
    Display-ready customer dashboard.

    Empty ``acquisition_channels``, ``recent_activity`` and ``ai_insights``
    and a ``None`` loyalty block mean "not yet available", not zero.
    """

    summary: CustomerSummary
    ltv: LifetimeValueSummary
    segments: List[SegmentSummary] = Field(default_factory=list)
    top_customers: List[TopCustomerEntry] = Field(default_factory=list)
    at_risk_customers: List[AtRiskCustomerEntry] = Field(default_factory=list)
    acquisition_channels: List[dict] = Field(default_factory=list)
    loyalty: Optional[dict] = None
    recent_activity: List[dict] = Field(default_factory=list)
    ai_insights: List[dict] = Field(default_factory=list)
