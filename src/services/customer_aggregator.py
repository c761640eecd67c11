"""
Customer analytics aggregation.

Turns the raw customer list from the admin API into the dashboard
view-model: headline counts, lifetime value, segment breakdown, top
spenders and at-risk customers. Pure apart from the clock used for
recency scoring; nothing is cached between calls.
"""

from __future__ import annotations

import math
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Tuple

from models.customer import (
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
from utils.logging_config import get_logger

logger = get_logger(__name__)

TOP_CUSTOMERS_LIMIT = 5
AT_RISK_LIMIT = 4
PLACEHOLDER_RISK_SCORE = 50

SEGMENT_STYLE: Dict[Segment, Tuple[str, str]] = {
    Segment.VIP: ("gold", "crown"),
    Segment.ACTIVE: ("green", "heart"),
    Segment.NEW: ("cyan", "spark"),
    Segment.INACTIVE: ("red", "alert"),
}
DEFAULT_SEGMENT_STYLE = ("blue", "user")

ACTIVE_SEGMENTS = frozenset({Segment.ACTIVE, Segment.VIP})


def segment_style(segment: Any) -> Tuple[str, str]:
    """Return ``(color_token, icon_token)``; unknown values get the default."""
    if not isinstance(segment, Segment):
        try:
            segment = Segment(segment)
        except ValueError:
            return DEFAULT_SEGMENT_STYLE
    return SEGMENT_STYLE.get(segment, DEFAULT_SEGMENT_STYLE)


def _percent(part: int, total: int) -> float:
    return part / total * 100 if total else 0.0


def _clamp(value: float) -> float:
    """Keep sums of very large amounts finite."""
    return value if math.isfinite(value) else sys.float_info.max


def _total(values: Iterable[float]) -> float:
    return _clamp(sum(values))


def _mean(values: List[float]) -> float:
    count = len(values)
    total = sum(values)
    if math.isfinite(total):
        return total / count
    # Sum overflowed; divide first so every term stays in range.
    return _clamp(sum(v / count for v in values))


def _median(values: List[float]) -> float:
    ordered = sorted(values)
    middle = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[middle]
    return ordered[middle - 1] / 2 + ordered[middle] / 2


@dataclass
class CustomerAggregator:
    """Builds a CustomerDashboardViewModel from customer records."""

    top_limit: int = TOP_CUSTOMERS_LIMIT
    at_risk_limit: int = AT_RISK_LIMIT

    def aggregate(
        self,
        records: Iterable[Any],
        now: Optional[datetime] = None,
    ) -> CustomerDashboardViewModel:
        """Aggregate records into the dashboard view-model. Never raises on bad fields."""
        customers = self._normalize(records)
        now = now or datetime.now(timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        total = len(customers)

        active = sum(1 for c in customers if c.segment in ACTIVE_SEGMENTS)
        summary = CustomerSummary(
            total_customers=total,
            new_this_month=sum(1 for c in customers if c.segment == Segment.NEW),
            active_customers=active,
            active_percent=_percent(active, total),
        )

        view_model = CustomerDashboardViewModel(
            summary=summary,
            ltv=self._lifetime_value(customers),
            segments=self._segments(customers),
            top_customers=self._top_customers(customers),
            at_risk_customers=self._at_risk(customers, now),
        )

        logger.info(
            "Customer dashboard aggregated",
            extra={
                "total_customers": total,
                "segments": len(view_model.segments),
                "at_risk": len(view_model.at_risk_customers),
            },
        )
        return view_model

    def _normalize(self, records: Iterable[Any]) -> List[CustomerRecord]:
        customers: List[CustomerRecord] = []
        skipped = 0
        for record in records or ():
            if isinstance(record, CustomerRecord):
                customers.append(record)
            elif isinstance(record, Mapping):
                customers.append(CustomerRecord.model_validate(dict(record)))
            else:
                skipped += 1
        if skipped:
            logger.warning("Skipped non-object customer records", extra={"skipped": skipped})
        return customers

    def _lifetime_value(self, customers: List[CustomerRecord]) -> LifetimeValueSummary:
        if not customers:
            return LifetimeValueSummary()

        spends = [c.total_spent for c in customers]
        return LifetimeValueSummary(
            average=_mean(spends),
            median=_median(spends),
            top_decile_value=max(spends),
        )

    def _segments(self, customers: List[CustomerRecord]) -> List[SegmentSummary]:
        # dicts keep insertion order, so segments come out as first seen.
        groups: Dict[Segment, List[CustomerRecord]] = {}
        for customer in customers:
            groups.setdefault(customer.segment, []).append(customer)

        total = len(customers)
        summaries = []
        for segment, members in groups.items():
            color, icon = segment_style(segment)
            summaries.append(
                SegmentSummary(
                    key=segment,
                    name=segment.label,
                    count=len(members),
                    percent=_percent(len(members), total),
                    total_value=_total(m.total_spent for m in members),
                    color_token=color,
                    icon_token=icon,
                )
            )
        return summaries

    def _top_customers(self, customers: List[CustomerRecord]) -> List[TopCustomerEntry]:
        # sorted() is stable, so ties keep input order.
        ranked = sorted(customers, key=lambda c: c.total_spent, reverse=True)
        return [
            TopCustomerEntry(
                rank=position,
                id=c.id,
                name=c.name,
                email=c.email,
                total_spent=c.total_spent,
                order_count=c.order_count,
                segment=c.segment,
                last_order_at=c.last_order_at,
            )
            for position, c in enumerate(ranked[: self.top_limit], start=1)
        ]

    def _at_risk(self, customers: List[CustomerRecord], now: datetime) -> List[AtRiskCustomerEntry]:
        inactive = [c for c in customers if c.segment == Segment.INACTIVE]
        entries = []
        for c in inactive[: self.at_risk_limit]:
            score, level, basis = self._risk(c, now)
            entries.append(
                AtRiskCustomerEntry(
                    id=c.id,
                    name=c.name,
                    email=c.email,
                    total_spent=c.total_spent,
                    last_order_at=c.last_order_at,
                    risk_score=score,
                    risk_level=level,
                    risk_basis=basis,
                )
            )
        return entries

    def _risk(self, customer: CustomerRecord, now: datetime) -> Tuple[int, str, RiskBasis]:
        """Score churn risk from recency and order frequency when recency is known."""
        if customer.last_order_at is None:
            return PLACEHOLDER_RISK_SCORE, "medium", RiskBasis.PLACEHOLDER

        points = 0
        days_since = (now - customer.last_order_at).days
        if days_since > 60:
            points += 3
        elif days_since > 30:
            points += 1

        if customer.order_count <= 1:
            points += 2
        elif customer.order_count <= 3:
            points += 1

        if points >= 4:
            level = "high"
        elif points >= 2:
            level = "medium"
        else:
            level = "low"
        return min(100, points * 20), level, RiskBasis.RECENCY_FREQUENCY


def aggregate_customers(records: Iterable[Any], now: Optional[datetime] = None) -> CustomerDashboardViewModel:
    """Aggregate with the default limits."""
    return CustomerAggregator().aggregate(records, now=now)
