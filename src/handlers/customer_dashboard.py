"""Handler for GET /dashboard/customers."""

from typing import Optional

from models.result import LoadState
from utils.error_handling import FailureReason
from utils.logging_config import get_logger

logger = get_logger(__name__)

# Lazy-loaded service to avoid building HTTP clients at import time
_dashboard_service: Optional["DashboardService"] = None

FAILURE_STATUS = {
    FailureReason.NOT_CONFIGURED: 503,
    FailureReason.UNAUTHORIZED: 401,
    FailureReason.TRANSPORT_ERROR: 502,
}


def _get_dashboard_service():
    """Lazy-load DashboardService."""
    global _dashboard_service
    if _dashboard_service is None:
        from services.dashboard_service import DashboardService
        _dashboard_service = DashboardService()
    return _dashboard_service


def lambda_handler(event, context):
    """Return the customer dashboard view-model wrapped in a LoadResult."""
    query_params = event.get("queryStringParameters") or {}
    refresh = str(query_params.get("refresh", "")).lower() in ("1", "true", "yes")

    result = _get_dashboard_service().load_customer_dashboard(use_cache=not refresh)

    status = 200
    if result.state == LoadState.FAILED:
        status = FAILURE_STATUS.get(result.reason, 502)
        logger.info(
            "Customer dashboard failed",
            extra={"reason": result.reason.value if result.reason else None},
        )

    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": result.model_dump_json(),
    }
