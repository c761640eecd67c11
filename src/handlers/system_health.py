"""Handler for GET /dashboard/health (admin API health as seen by the UI)."""

from typing import Optional

_dashboard_service: Optional["DashboardService"] = None


def _get_dashboard_service():
    """Lazy-load DashboardService."""
    global _dashboard_service
    if _dashboard_service is None:
        from services.dashboard_service import DashboardService
        _dashboard_service = DashboardService()
    return _dashboard_service


def lambda_handler(event, context):
    """Return the reduced health view-model; 401 when the upstream wants a login."""
    health = _get_dashboard_service().check_health()
    return {
        "statusCode": 401 if health.requires_login else 200,
        "headers": {"Content-Type": "application/json"},
        "body": health.model_dump_json(),
    }
