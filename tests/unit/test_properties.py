"""
Property-based tests for customer aggregation using Hypothesis.

These check the collection-wide invariants of the dashboard view-model
for arbitrary customer lists, including malformed amounts.
"""

from datetime import datetime, timezone

import hypothesis.strategies as st
import pytest
from hypothesis import given, settings

from models.customer import Segment
from services.customer_aggregator import aggregate_customers
from utils.parsing import parse_amount

NOW = datetime(2026, 10, 1, tzinfo=timezone.utc)

amounts = st.one_of(
    st.floats(min_value=0, max_value=1e6, allow_nan=False, allow_infinity=False),
    st.integers(min_value=0, max_value=10**6),
    st.sampled_from(["12.50", "bad", "", "  7", "1e3", "-5"]),
    st.none(),
)

records_strategy = st.lists(
    st.fixed_dictionaries(
        {
            "total_spent": amounts,
            "segment": st.sampled_from(["vip", "active", "new", "inactive", None, "legacy"]),
        }
    ),
    max_size=40,
)


@given(records=records_strategy)
@settings(max_examples=100)
def test_prop_segment_counts_sum_to_total(records):
    vm = aggregate_customers(records, now=NOW)
    assert sum(s.count for s in vm.segments) == vm.summary.total_customers == len(records)


@given(records=records_strategy)
@settings(max_examples=100)
def test_prop_segment_percentages(records):
    vm = aggregate_customers(records, now=NOW)
    if vm.summary.total_customers:
        assert sum(s.percent for s in vm.segments) == pytest.approx(100)
    else:
        assert vm.segments == []
        assert vm.summary.active_percent == 0


@given(records=records_strategy)
@settings(max_examples=100)
def test_prop_top_customers_sorted_and_sized(records):
    vm = aggregate_customers(records, now=NOW)
    spends = [c.total_spent for c in vm.top_customers]
    assert spends == sorted(spends, reverse=True)
    assert len(vm.top_customers) == min(5, len(records))


@given(records=records_strategy)
@settings(max_examples=100)
def test_prop_at_risk_only_inactive_in_order(records):
    vm = aggregate_customers(records, now=NOW)
    assert len(vm.at_risk_customers) <= 4
    expected = [parse_amount(r["total_spent"]) for r in records if r["segment"] == "inactive"][:4]
    assert [c.total_spent for c in vm.at_risk_customers] == expected


@given(records=records_strategy)
@settings(max_examples=100)
def test_prop_average_times_count_is_sum(records):
    vm = aggregate_customers(records, now=NOW)
    total = sum(parse_amount(r["total_spent"]) for r in records)
    assert vm.ltv.average * vm.summary.total_customers == pytest.approx(total, rel=1e-9, abs=1e-6)
    assert all(s.key in Segment for s in vm.segments)
