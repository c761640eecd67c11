"""
Dashboard service.

Composes the admin API client with the aggregation and health reduction
cores and reports results as LoadResult values, so every failure reaches
the caller as a distinct reason instead of a generic error.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from clients.admin_api import AdminApiClient
from config.settings import Settings
from models.customer import CustomerDashboardViewModel
from models.health import HealthViewModel
from models.result import LoadResult
from services.customer_aggregator import CustomerAggregator
from services.health_reducer import HealthReducer
from utils.cache_service import LRUCache
from utils.error_handling import AppError
from utils.logging_config import get_logger

logger = get_logger(__name__)


class DashboardService:
    """Loads the customer dashboard and system health for the admin UI."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[AdminApiClient] = None,
        cache: Optional[LRUCache] = None,
    ):
        self.settings = settings or Settings.from_environment()
        self.client = client or AdminApiClient(self.settings)
        self.cache = cache or LRUCache(
            max_size=self.settings.cache_max_size,
            ttl_seconds=self.settings.cache_ttl_seconds,
        )
        self.aggregator = CustomerAggregator(
            top_limit=self.settings.top_customers_limit,
            at_risk_limit=self.settings.at_risk_limit,
        )
        self.reducer = HealthReducer()

    def _customer_records(self, use_cache: bool) -> List[Dict[str, Any]]:
        cache_key = f"customers:{self.settings.api_url}"
        if use_cache:
            cached = self.cache.get(cache_key)
            if cached is not None:
                logger.info("Customer records cache hit", extra={"count": len(cached)})
                return cached

        records = self.client.fetch_customers()
        self.cache.set(cache_key, records)
        return records

    def load_customer_dashboard(
        self, use_cache: bool = True
    ) -> LoadResult[CustomerDashboardViewModel]:
        """Fetch customers and aggregate them, or report why that was not possible."""
        try:
            records = self._customer_records(use_cache)
        except AppError as exc:
            logger.warning(
                "Customer dashboard unavailable",
                extra={"reason": exc.reason.value, "error": str(exc)},
            )
            return LoadResult[CustomerDashboardViewModel].from_error(exc)

        view_model = self.aggregator.aggregate(records)
        return LoadResult[CustomerDashboardViewModel].ready(view_model)

    def check_health(self) -> HealthViewModel:
        """Query the admin API health endpoint once and reduce the outcome."""
        payload, outcome = self.client.fetch_health()
        return self.reducer.reduce(payload, outcome)
