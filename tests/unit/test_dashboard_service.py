"""
Dashboard service tests with a mocked admin API client.

Run with: pytest tests/unit/test_dashboard_service.py -v
"""

from unittest.mock import MagicMock

import pytest

from models.health import TransportOutcome
from models.result import LoadState
from services.dashboard_service import DashboardService
from utils.error_handling import (
    FailureReason,
    NotConfiguredError,
    TransportError,
    UnauthorizedError,
)


@pytest.fixture
def client():
    return MagicMock()


@pytest.fixture
def service(settings, client):
    return DashboardService(settings=settings, client=client)


class TestLoadCustomerDashboard:
    def test_ready(self, service, client, sample_records):
        client.fetch_customers.return_value = sample_records
        result = service.load_customer_dashboard()
        assert result.state == LoadState.READY
        assert result.data.summary.total_customers == 3
        assert result.data.top_customers[0].name == "Ada"

    def test_records_are_cached(self, service, client, sample_records):
        client.fetch_customers.return_value = sample_records
        service.load_customer_dashboard()
        service.load_customer_dashboard()
        assert client.fetch_customers.call_count == 1

    def test_refresh_bypasses_cache(self, service, client, sample_records):
        client.fetch_customers.return_value = sample_records
        service.load_customer_dashboard()
        service.load_customer_dashboard(use_cache=False)
        assert client.fetch_customers.call_count == 2

    @pytest.mark.parametrize(
        "error, reason",
        [
            (NotConfiguredError(), FailureReason.NOT_CONFIGURED),
            (UnauthorizedError(), FailureReason.UNAUTHORIZED),
            (TransportError("Unable to connect to API"), FailureReason.TRANSPORT_ERROR),
        ],
    )
    def test_failures_keep_distinct_reasons(self, service, client, error, reason):
        client.fetch_customers.side_effect = error
        result = service.load_customer_dashboard()
        assert result.state == LoadState.FAILED
        assert result.reason == reason
        assert result.message == str(error)
        assert result.data is None

    def test_failures_are_not_cached(self, service, client, sample_records):
        client.fetch_customers.side_effect = [TransportError(), sample_records]
        assert service.load_customer_dashboard().state == LoadState.FAILED
        assert service.load_customer_dashboard().state == LoadState.READY


class TestCheckHealth:
    def test_reduces_health_response(self, service, client):
        client.fetch_health.return_value = ({"status": "ok"}, TransportOutcome.ok())
        health = service.check_health()
        assert health.is_healthy is True

    def test_health_is_never_cached(self, service, client):
        client.fetch_health.return_value = (None, TransportOutcome.network_failure("down"))
        service.check_health()
        service.check_health()
        assert client.fetch_health.call_count == 2
